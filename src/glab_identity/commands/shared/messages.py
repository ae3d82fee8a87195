"""
Human-readable guidance printed around the authentication and setup flow.
"""

from typing import Optional

from rich.markup import escape

from glab_identity.constants import (
    APP_NAME,
    OAUTH_REDIRECT_URL,
    TOKEN_REQUIRED_SCOPES,
)
from glab_identity.models import GitIdentity, Scope, UserInfo
from glab_identity.utils.console import (
    console,
    create_table,
    display_panel,
    info,
    plain,
    success,
    warning,
)


def print_headless_auth_instructions(hostname: str) -> None:
    """Explain how to finish the OAuth flow where no browser can be opened"""
    lines = [
        "If you see a browser URL but cannot open it, follow these steps:",
        "",
        "1. Copy the authorization URL displayed above",
        "2. Open it in your local browser and complete the OAuth flow",
        f"3. You will be redirected to: {OAUTH_REDIRECT_URL}?code=...&state=...",
        "4. Use curl to send that redirect URL back to glab:",
        "",
        f'   curl -L "{OAUTH_REDIRECT_URL}?code=YOUR_CODE&state=YOUR_STATE"',
        "",
        "Alternatively, use token-based authentication:",
        "",
        "1. Generate a Personal Access Token at:",
        f"   https://{hostname}/-/profile/personal_access_tokens",
        f"   Required scopes: {TOKEN_REQUIRED_SCOPES}",
        "",
        "2. Re-run with your token:",
        f"   {APP_NAME} --token YOUR_TOKEN",
    ]
    plain()
    display_panel(
        escape("\n".join(lines)),
        title="Authentication in Docker/Server Environments",
    )
    plain()


def print_login_failure_help(hostname: str) -> None:
    """Recovery options after `glab auth login` failed"""
    plain()
    warning("Authentication failed. Please try one of the following:")
    plain()
    plain("Option 1: Interactive login")
    plain("  glab auth login")
    plain()
    plain("Option 2: Token-based login (recommended for headless)")
    plain(f"  glab auth login --hostname {hostname} --token YOUR_TOKEN")
    plain()
    plain("Option 3: Use this tool with a token")
    plain(f"  {APP_NAME} --token YOUR_TOKEN")


def display_results(user: UserInfo, scope: Scope, dry_run: bool) -> None:
    """Show what was (or would be) written to git config"""
    plain()
    title = "[DRY MODE] Would configure" if dry_run else "Git configured"
    table = create_table(escape(title), ["Key", "Value"])
    table.add_row("user.name", user.username)
    table.add_row("user.email", user.email)
    table.add_row("scope", f"{scope.value} ({scope.flag})")
    console.print(table)

    if dry_run:
        return

    plain()
    success("Git identity setup complete!")
    plain()
    info("You can verify your configuration with:")
    plain("  glab auth status")
    plain(f"  git config {scope.flag} user.name")
    plain(f"  git config {scope.flag} user.email")


def display_identity_value(value: Optional[str] = None) -> None:
    plain(f"   {value}" if value else "   (not set)")


def display_identity(identity: GitIdentity, scope: Scope) -> None:
    """Print user.name and user.email as steps 2 and 3 of a verification"""
    plain(f"2. Git user.name ({scope.value}):")
    plain(f"   $ git config {scope.flag} user.name")
    display_identity_value(identity.username)
    plain()
    plain(f"3. Git user.email ({scope.value}):")
    plain(f"   $ git config {scope.flag} user.email")
    display_identity_value(identity.email)
    plain()
