import os
from pathlib import Path

from glab_identity.logging.config import (
    LogLevel,
    LogConfig,
    PROGRESS_LOGGERS,
    get_log_directory,
)


def test_log_level_parse():
    assert LogLevel.parse("debug") is LogLevel.DEBUG
    assert LogLevel.parse(" Warning ") is LogLevel.WARNING
    assert LogLevel.parse("verbose") is None
    assert LogLevel.parse(None) is None


def test_log_config_defaults():
    cfg = LogConfig()

    assert cfg.file_level == LogLevel.INFO
    assert cfg.echo_loggers == ()
    assert cfg.console_level == LogLevel.WARNING
    assert cfg.log_commands is True
    assert cfg.log_filename == "glab-setup-git-identity.log"
    assert "token" in cfg.sensitive_keys


def test_get_log_directory_windows(mocker, tmp_path):
    mocker.patch("platform.system", return_value="Windows")
    mocker.patch.dict(os.environ, {"APPDATA": str(tmp_path)})

    log_dir = get_log_directory()

    assert log_dir.exists()
    assert log_dir.name == "logs"
    assert str(log_dir).startswith(str(tmp_path))


def test_get_log_directory_macos(mocker, tmp_path):
    mocker.patch("platform.system", return_value="Darwin")
    mocker.patch("pathlib.Path.home", return_value=tmp_path)

    log_dir = get_log_directory()

    assert log_dir.exists()
    assert "Library" in str(log_dir)


def test_get_log_directory_linux_with_xdg(mocker, tmp_path):
    mocker.patch("platform.system", return_value="Linux")
    mocker.patch.dict(os.environ, {"XDG_DATA_HOME": str(tmp_path)})

    log_dir = get_log_directory()

    assert log_dir.exists()
    assert log_dir == tmp_path / "glab-setup-git-identity" / "logs"


def test_get_log_directory_linux_fallback_home(mocker, tmp_path):
    mocker.patch("platform.system", return_value="Linux")
    mocker.patch.dict(os.environ, {"XDG_DATA_HOME": ""})
    mocker.patch("pathlib.Path.home", return_value=tmp_path)

    log_dir = get_log_directory()

    assert log_dir == tmp_path / ".local" / "share" / "glab-setup-git-identity" / "logs"


def test_get_log_directory_falls_back_to_cwd(mocker, tmp_path, monkeypatch):
    mocker.patch("platform.system", return_value="Linux")
    mocker.patch.dict(os.environ, {"XDG_DATA_HOME": "/nonexistent"})
    mocker.patch("pathlib.Path.mkdir", side_effect=[PermissionError("denied"), None])
    monkeypatch.chdir(tmp_path)

    log_dir = get_log_directory()

    assert log_dir.name == "logs"
    assert log_dir.parent == Path.cwd()


def test_log_file_path(mocker, tmp_path):
    mocker.patch(
        "glab_identity.logging.config.get_log_directory", return_value=tmp_path
    )

    assert LogConfig().log_file_path == tmp_path / "glab-setup-git-identity.log"
    assert LogConfig(log_filename="x.log").log_file_path == tmp_path / "x.log"


def test_from_environment_reads_file_level(monkeypatch):
    monkeypatch.setenv("GLAB_SETUP_GIT_IDENTITY_LOG_LEVEL", "debug")

    assert LogConfig.from_environment().file_level == LogLevel.DEBUG


def test_from_environment_ignores_unknown_level(monkeypatch):
    monkeypatch.setenv("GLAB_SETUP_GIT_IDENTITY_LOG_LEVEL", "chatty")

    assert LogConfig.from_environment().file_level == LogLevel.INFO


def test_for_cli_echoes_progress(monkeypatch):
    monkeypatch.delenv("GLAB_SETUP_GIT_IDENTITY_LOG_LEVEL", raising=False)

    cfg = LogConfig.for_cli(verbose=False)

    assert cfg.console_level == LogLevel.WARNING
    assert cfg.echo_loggers == PROGRESS_LOGGERS


def test_for_cli_verbose_logs_everything(monkeypatch):
    monkeypatch.setenv("GLAB_SETUP_GIT_IDENTITY_LOG_LEVEL", "error")

    cfg = LogConfig.for_cli(verbose=True)

    assert cfg.file_level == LogLevel.DEBUG
    assert cfg.console_level == LogLevel.DEBUG
    assert cfg.echo_loggers == ()
