import logging
import re

from glab_identity.logging import (
    LogConfig,
    get_logger,
    log_command_call,
    setup_logging,
)


def _fake_file_handler(*args, **kwargs):
    handler = logging.NullHandler()
    handler.setLevel(logging.DEBUG)
    return handler


def _patch_handlers(mocker, tmp_path):
    mocker.patch(
        "glab_identity.logging.config.get_log_directory",
        return_value=tmp_path,
    )
    mocker.patch(
        "logging.handlers.TimedRotatingFileHandler", side_effect=_fake_file_handler
    )


def test_setup_logging_adds_file_and_console_handlers(mocker, tmp_path):
    _patch_handlers(mocker, tmp_path)

    setup_logging(force_reconfigure=True)

    root_logger = logging.getLogger("glab_identity")
    assert len(root_logger.handlers) == 2


def test_setup_logging_verbose_lowers_levels(mocker, tmp_path):
    _patch_handlers(mocker, tmp_path)

    setup_logging(
        LogConfig.for_cli(verbose=True),
        force_reconfigure=True,
    )

    assert logging.getLogger("glab_identity").level == logging.DEBUG
    setup_logging(force_reconfigure=True)


def test_setup_logging_reads_level_from_environment(mocker, tmp_path, monkeypatch):
    _patch_handlers(mocker, tmp_path)
    monkeypatch.setenv("GLAB_SETUP_GIT_IDENTITY_LOG_LEVEL", "debug")

    setup_logging(force_reconfigure=True)

    assert logging.getLogger("glab_identity").level == logging.DEBUG
    monkeypatch.delenv("GLAB_SETUP_GIT_IDENTITY_LOG_LEVEL")
    setup_logging(force_reconfigure=True)


def test_setup_logging_survives_unwritable_log_file(mocker, tmp_path):
    _patch_handlers(mocker, tmp_path)
    mocker.patch(
        "logging.handlers.TimedRotatingFileHandler", side_effect=PermissionError("denied")
    )

    setup_logging(force_reconfigure=True)

    root_logger = logging.getLogger("glab_identity")
    assert len(root_logger.handlers) == 1


def test_get_logger_returns_same_instance():
    assert get_logger("glab_identity.test") is get_logger("glab_identity.test")


def test_log_command_call_success_is_debug(mocker):
    real_logger = logging.getLogger("glab_identity.exec")
    spy = mocker.spy(real_logger, "debug")

    log_command_call("git", ["config", "--global", "user.name"], exit_code=0, duration=0.1)

    spy.assert_called_once()


def test_log_command_call_failure_is_info(mocker):
    real_logger = logging.getLogger("glab_identity.exec")
    spy = mocker.spy(real_logger, "info")

    log_command_call("git", ["config", "--global", "user.name"], exit_code=1, error="unset")

    spy.assert_called_once()
    assert spy.call_args[1]["extra"]["command_error"] == "unset"


def test_log_command_call_masks_tokens(mocker):
    real_logger = logging.getLogger("glab_identity.exec")
    spy = mocker.spy(real_logger, "debug")

    log_command_call("glab", ["auth", "login", "--token", "glpat-secret"], exit_code=0)

    argv = spy.call_args[1]["extra"]["command_argv"]
    assert argv == ["glab", "auth", "login", "--token", "***"]


def test_cli_config_echoes_library_progress(mocker, tmp_path):
    _patch_handlers(mocker, tmp_path)
    echo = mocker.patch("glab_identity.utils.console.info")

    setup_logging(LogConfig.for_cli(verbose=False), force_reconfigure=True)
    try:
        get_logger("glab_identity.identity.credentials").info(
            "Git credential helper configured for gitlab.com"
        )
        get_logger("glab_identity.gitlab.client").info("GitLab CLI authentication successful")
        get_logger("glab_identity.gitlab.client").debug("Running: glab auth status")
        get_logger("glab_identity.identity.auth").warning("Failed to setup git credential helper")
        log_command_call("git", ["config", "--global", "user.name"], exit_code=1)
    finally:
        setup_logging(force_reconfigure=True)

    assert [c.args[0] for c in echo.call_args_list] == [
        "Git credential helper configured for gitlab.com",
        "GitLab CLI authentication successful",
    ]


def test_default_config_does_not_echo(mocker, tmp_path):
    _patch_handlers(mocker, tmp_path)
    echo = mocker.patch("glab_identity.utils.console.info")

    setup_logging(force_reconfigure=True)
    get_logger("glab_identity.identity.credentials").info("Git credential helper configured")

    echo.assert_not_called()


def test_console_handler_omits_timestamps(mocker, tmp_path, capsys):
    _patch_handlers(mocker, tmp_path)

    setup_logging(LogConfig.for_cli(verbose=True), force_reconfigure=True)
    try:
        log_command_call("glab", ["auth", "status"], exit_code=0, duration=0.01)
    finally:
        setup_logging(force_reconfigure=True)

    err = capsys.readouterr().err
    assert "DEBUG [glab_identity.exec] glab auth status -> 0" in err
    assert not re.search(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} DEBUG \[glab_identity.exec\]", err)
