"""
chestmeta shared configuration, constants, and module-level state.
Standalone module — no imports from other project files except exceptions.
"""

import os

from chestmeta.exceptions import CliError, SetupError  # noqa: F401

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")


def load_env():
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip()
    return env


def _env_value(key, default=None):
    """Process environment wins over the .env file."""
    if key in os.environ:
        return os.environ[key]
    return env.get(key, default)


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = _env_value(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_choice(key, choices, default):
    """Return the env value if it is one of *choices*, else *default*."""
    raw = _env_value(key)
    if raw is None:
        return default
    raw = raw.strip().lower()
    return raw if raw in choices else default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.3.0"
CONTRACT_SCHEMA_VERSION = "1.0"

VALID_FORMATS = ("json", "table")
VALID_RESPONSE_MODES = ("legacy", "envelope")

# Signed 32-bit bounds for the manual sort order.
ORDER_MIN = -(2**31)
ORDER_MAX = 2**31 - 1

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env / environment)
# ---------------------------------------------------------------------------

env = load_env()

# Host name for a container that was never renamed.
UNNAMED_NAME = _env_value("CHESTMETA_UNNAMED_NAME", "Chest")
DEFAULT_LOCATION = _env_value("CHESTMETA_DEFAULT_LOCATION", "")
TAG_LOG_ENABLED = _env_bool("CHESTMETA_TAG_LOG", False)
MCP_RESPONSE_MODE = _env_choice("CHESTMETA_MCP_RESPONSE_MODE", VALID_RESPONSE_MODES, "legacy")

# ---------------------------------------------------------------------------
# Runtime flags (set by cli.main)
# ---------------------------------------------------------------------------

RUNTIME_QUIET = False
RUNTIME_VERBOSE = False


def check_config():
    """Validate loaded configuration. Raises SetupError on bad values."""
    if not isinstance(UNNAMED_NAME, str) or UNNAMED_NAME == "":
        raise SetupError(
            "[SETUP_NEEDED] CHESTMETA_UNNAMED_NAME is empty. "
            "Remove it from .env to use the default 'Chest'."
        )
