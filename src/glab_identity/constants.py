"""
Global constants for the glab-setup-git-identity CLI.
"""

# Application identity
APP_NAME = "glab-setup-git-identity"

# GitLab CLI
GLAB_EXECUTABLE = "glab"
GLAB_INSTALL_URL = "https://gitlab.com/gitlab-org/cli#installation"

# Default options for glab auth login
DEFAULT_HOSTNAME = "gitlab.com"
DEFAULT_GIT_PROTOCOL = "https"
DEFAULT_API_PROTOCOL = "https"
DEFAULT_USE_KEYRING = False

# Git credential helper
CREDENTIAL_HELPER_TEMPLATE = "!{glab_path} auth git-credential"
CREDENTIAL_URL_TEMPLATE = "https://{hostname}"

# Git identity keys
GIT_USER_NAME_KEY = "user.name"
GIT_USER_EMAIL_KEY = "user.email"

# Exit code reported when an executable cannot be spawned at all
SPAWN_FAILURE_EXIT_CODE = 127

# Environment variables used as CLI defaults
ENV_LOCAL = "GLAB_SETUP_GIT_IDENTITY_LOCAL"
ENV_VERBOSE = "GLAB_SETUP_GIT_IDENTITY_VERBOSE"
ENV_DRY_RUN = "GLAB_SETUP_GIT_IDENTITY_DRY_RUN"
ENV_LOG_LEVEL = "GLAB_SETUP_GIT_IDENTITY_LOG_LEVEL"
ENV_AUTH_HOSTNAME = "GLAB_AUTH_HOSTNAME"
ENV_AUTH_TOKEN = "GLAB_AUTH_TOKEN"
ENV_AUTH_GIT_PROTOCOL = "GLAB_AUTH_GIT_PROTOCOL"
ENV_AUTH_API_PROTOCOL = "GLAB_AUTH_API_PROTOCOL"
ENV_AUTH_API_HOST = "GLAB_AUTH_API_HOST"
ENV_AUTH_USE_KEYRING = "GLAB_AUTH_USE_KEYRING"
ENV_AUTH_JOB_TOKEN = "GLAB_AUTH_JOB_TOKEN"

# Headless authentication help
OAUTH_REDIRECT_URL = "http://localhost:7171/auth/redirect"
TOKEN_REQUIRED_SCOPES = "api, write_repository"

# Logging constants
LOG_APP_NAME = "glab-setup-git-identity"
LOG_FILE_NAME = "glab-setup-git-identity"
LOG_RETENTION_DAYS = 7

# Sensitive data keys for sanitization
SENSITIVE_KEYS = (
    "password", "token", "job_token", "access_token", "secret",
    "authorization", "private_key", "api_key", "bearer", "cookie",
)

# Command-line flags whose following value must never be logged
SENSITIVE_FLAGS = ("--token", "--job-token")
