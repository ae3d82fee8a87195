import typer
from glab_identity.commands.setup import setup_command
from glab_identity.constants import APP_NAME
from glab_identity.logging import setup_logging, get_logger

app = typer.Typer(
    name=APP_NAME,
    help="Set up git identity based on the GitLab account used by [bold]glab[/bold]",
    rich_markup_mode="rich",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command(
    epilog=(
        "Examples:\n\n"
        f"  {APP_NAME}                        Setup git identity globally\n\n"
        f"  {APP_NAME} --local                Setup git identity for current repository only\n\n"
        f"  {APP_NAME} --dry-run              Show what would be configured\n\n"
        f"  {APP_NAME} --verify               Verify current git identity configuration\n\n"
        f"  {APP_NAME} --hostname gitlab.company.com   Use a self-hosted GitLab\n\n"
        f'  echo "$TOKEN" | {APP_NAME} --stdin   Authenticate using token from stdin\n\n'
        f'  {APP_NAME} --job-token "$CI_JOB_TOKEN"   Authenticate using CI job token'
    )
)(setup_command)


def main():
    # Initialize logging early
    setup_logging()
    logger = get_logger("glab_identity.main")
    logger.debug("CLI started")

    try:
        app()
    except Exception as e:
        logger.error(f"Unhandled exception in main: {str(e)}")
        raise
    finally:
        logger.debug("CLI finished")


if __name__ == "__main__":
    main()
