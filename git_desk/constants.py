"""Shared constants for git-desk."""

# Branch naming
DEFAULT_MAIN_BRANCH = "main"
DEFAULT_DESK_PREFIX = "desk-"
DEFAULT_REMOTE = "origin"

# Characters allowed in a desk id (the part after the desk prefix)
DESK_ID_PATTERN = r"[A-Za-z0-9._-]+"

# Stacking tool
DEFAULT_STACK_COMMAND = "gs"

# A single space, not an empty string, so the stacking tool treats the body
# as provided and does not auto-fill one from the commit messages.
DEFAULT_SUBMIT_BODY = " "

# Environment
CONFIG_ENV_VAR = "GIT_DESK_CONFIG"


# Symbol constants
SYMBOL_SUCCESS = "✅"


# CLI colors (Rich color names)
CLI_COLORS = {
    "success": "green",
    "error": "red",
    "warning": "yellow",
    "info": "cyan",
}
