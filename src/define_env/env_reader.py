"""Env file loading for define_env."""

import logging
import re
from pathlib import Path

from dotenv import dotenv_values

from .environment_helper import debug_log
from .exceptions import EnvFileNotFoundError, InvalidEnvFileError
from .types import EnvDefines

_ENV_KEY_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class EnvFileReader:
    """Reads KEY=VALUE entries from a .env file."""

    @staticmethod
    def load_env_file(env_file: Path) -> EnvDefines:
        """
        Load the entries of an env file in file order.

        Args:
            env_file: Path to the .env file

        Returns:
            Mapping of keys to values. Later duplicates overwrite earlier ones.

        Raises:
            EnvFileNotFoundError: If the file does not exist
            InvalidEnvFileError: If the file is not UTF-8 or has an invalid key
        """
        if not env_file.is_file():
            raise EnvFileNotFoundError(str(env_file))

        try:
            raw_values = dotenv_values(env_file, encoding="utf-8")
        except UnicodeDecodeError as e:
            raise InvalidEnvFileError(
                str(env_file), message=f"Invalid file encoding: {e}"
            ) from e

        defines: EnvDefines = {}
        for key, value in raw_values.items():
            if not EnvFileReader._is_valid_key(key):
                raise InvalidEnvFileError(
                    str(env_file), message=f"Invalid variable name: '{key}'", key=key
                )
            if value is None:
                logging.warning(f"Skipping '{key}' in {env_file}: no value assigned")
                continue
            defines[key] = value

        debug_log(f"load_env_file: loaded {len(defines)} entries from {env_file}")
        return defines

    @staticmethod
    def _is_valid_key(key: str) -> bool:
        """Check that a key can be used as a define name."""
        return bool(_ENV_KEY_PATTERN.match(key))
