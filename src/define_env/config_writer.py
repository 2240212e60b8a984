"""Base class for IDE config writers in define_env."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from .environment_helper import debug_log
from .exceptions import (
    ConfigFileNotFoundError,
    MalformedDocumentError,
    MissingConfigurationsError,
)


class ConfigWriter(ABC):
    """
    Writes a dart-define string into the config files of an IDE.

    Subclasses list the files they manage and implement ``write_config``,
    which turns the current content of one file into its new content.
    """

    def __init__(
        self,
        project_path: Path,
        define_string: str,
        config_name: Optional[str] = None,
        program_path: Optional[str] = None,
    ):
        self.project_path = Path(project_path)
        self.define_string = define_string
        self.config_name = config_name
        self.program_path = program_path

    @abstractmethod
    def mandatory_files(self) -> list[Path]:
        """Files that must exist and are always updated."""

    @abstractmethod
    def optional_files(self) -> list[Path]:
        """Files that are updated only when they exist."""

    @abstractmethod
    def write_config(self, file_content: str) -> str:
        """Return the new content for a file given its current content."""

    def update(self) -> list[Path]:
        """
        Update every managed file.

        All files are transformed in memory before the first one is written,
        so a failure leaves every file as it was.

        Returns:
            The paths that were written

        Raises:
            ConfigFileNotFoundError: If a mandatory file does not exist
            MalformedDocumentError: If a file cannot be parsed
            MissingConfigurationsError: If a file lacks its configuration list
        """
        for path in self.mandatory_files():
            if not path.is_file():
                raise ConfigFileNotFoundError(str(path))

        files = list(self.mandatory_files())
        for path in self.optional_files():
            if path.is_file():
                files.append(path)
            else:
                debug_log(f"update: skipping missing optional file {path}")

        updated: dict[Path, str] = {}
        for path in files:
            updated[path] = self._transform_file(path)

        for path, content in updated.items():
            path.write_text(content, encoding="utf-8")
            debug_log(f"update: wrote {path}")

        return list(updated)

    def _transform_file(self, path: Path) -> str:
        """Read one file and run ``write_config`` on it."""
        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise MalformedDocumentError(f"Invalid file encoding: {e}", str(path)) from e

        try:
            return self.write_config(content)
        except MalformedDocumentError as e:
            raise MalformedDocumentError(e.reason, str(path)) from e
        except MissingConfigurationsError as e:
            raise MissingConfigurationsError(str(path)) from e
