"""Environment variable operations for define_env."""

import os
import sys

DEFAULT_ENV_FILE = ".env"

_TRUTHY = ("1", "true", "yes", "on")


def debug_log(message: str) -> None:
    """Log debug message when DEFINE_ENV_DEBUG=1 is set."""
    if EnvironmentHelper.is_debug_enabled():
        print(f"[DEBUG] {message}", file=sys.stderr, flush=True)


class EnvironmentHelper:
    """Utility class for environment variable operations."""

    @staticmethod
    def is_debug_enabled() -> bool:
        """Check if debug tracing is requested via DEFINE_ENV_DEBUG."""
        return os.environ.get("DEFINE_ENV_DEBUG", "").lower() in _TRUTHY

    @staticmethod
    def get_default_env_file() -> str:
        """Get the env file to read when none is given on the command line."""
        env_file = os.environ.get("DEFINE_ENV_FILE", "").strip()
        return env_file or DEFAULT_ENV_FILE
