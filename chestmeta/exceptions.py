"""
chestmeta exception hierarchy.

All custom exceptions live here to avoid circular imports.
The tag codec itself never raises; these belong to the CLI and MCP layers.
"""


class CliError(Exception):
    """Exit code 1 — invalid flags, bad order values, oversized input."""

    exit_code = 1


class SetupError(CliError):
    """Exit code 2 — invalid configuration."""

    exit_code = 2
