"""VS Code launch.json writer for define_env."""

import json
import logging
import re
from pathlib import Path

from .config_writer import ConfigWriter
from .define_list import DART_DEFINE_FLAG, DART_DEFINE_SEPARATOR, DefineListBuilder
from .environment_helper import debug_log
from .exceptions import MalformedDocumentError, MissingConfigurationsError
from .path_helper import PathHelper
from .types import ArgsList, ConfigEntry, JsonValue, LaunchDocument

# launch.json allows // comments, plain JSON does not. String literals are
# matched first so that "//" inside a value (e.g. a URL) is left alone.
_STRING_OR_COMMENT_PATTERN = re.compile(r'("(?:\\.|[^"\\])*")|//[^\n]*')

JSON_INDENT = 2


class VscodeConfigWriter(ConfigWriter):
    """
    Config writer for VS Code.

    Reads .vscode/launch.json, keeps every non dart-define argument of each
    configuration and appends the arguments generated from the env file.
    The configuration named ``config_name`` is created when it is missing.
    """

    def mandatory_files(self) -> list[Path]:
        return [PathHelper.launch_config_path(self.project_path)]

    def optional_files(self) -> list[Path]:
        return []

    def write_config(self, file_content: str) -> str:
        """Return launch.json content with fresh dart-define arguments."""
        document = self._parse_document(self.strip_comments(file_content))
        configurations = self._get_configurations(document)
        define_list = DefineListBuilder.build_define_list(self.define_string)

        if self._find_config(configurations, self.config_name) is None:
            debug_log(f"write_config: creating configuration '{self.config_name}'")
            configurations.append(self.create_config(define_list))

        for config in configurations:
            self.update_config(config, define_list)

        return self.prettify_json(document)

    @staticmethod
    def strip_comments(file_content: str) -> str:
        """Remove // comments outside string literals. The comments are lost on write."""
        return _STRING_OR_COMMENT_PATTERN.sub(
            lambda match: match.group(1) or "", file_content
        )

    @staticmethod
    def _parse_document(content: str) -> LaunchDocument:
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise MalformedDocumentError(f"Invalid JSON: {e}") from e

    @staticmethod
    def _get_configurations(document: JsonValue) -> list:
        if not isinstance(document, dict):
            raise MissingConfigurationsError()
        configurations = document.get("configurations")
        if not isinstance(configurations, list):
            raise MissingConfigurationsError()
        for config in configurations:
            if not isinstance(config, dict):
                raise MalformedDocumentError(
                    f"Configuration entry is not an object: {config!r}"
                )
        return configurations

    @staticmethod
    def _find_config(configurations: list, name: str | None) -> ConfigEntry | None:
        return next(
            (config for config in configurations if config.get("name") == name),
            None,
        )

    def create_config(self, define_list: ArgsList) -> ConfigEntry:
        """Create a Dart launch configuration for ``config_name``."""
        return {
            "name": self.config_name,
            "request": "launch",
            "type": "dart",
            "program": self.program_path,
            "args": list(define_list),
        }

    @staticmethod
    def update_config(config: ConfigEntry, define_list: ArgsList) -> ConfigEntry:
        """Replace the dart-define arguments of a single configuration."""
        if "args" not in config:
            config["args"] = list(define_list)
            return config

        VscodeConfigWriter.clear_config(config)
        config["args"].extend(define_list)
        return config

    @staticmethod
    def clear_config(config: ConfigEntry) -> ConfigEntry:
        """Remove dart-define arguments, keeping everything else in place."""
        if "args" not in config:
            return config

        args = config["args"]
        if not isinstance(args, list):
            raise MalformedDocumentError(
                f"'args' of configuration {config.get('name')!r} is not a list"
            )

        debug_log(
            f"clear_config: user args of {config.get('name')!r}: "
            f"{DefineListBuilder.non_define_arguments(args)}"
        )

        while any(VscodeConfigWriter._is_define_arg(arg) for arg in args):
            index = args.index(DART_DEFINE_FLAG) if DART_DEFINE_FLAG in args else -1
            if 0 <= index < len(args) - 1:
                del args[index : index + 2]
            else:
                logging.warning(
                    f"Configuration {config.get('name')!r} has unpaired "
                    f"'{DART_DEFINE_FLAG}' arguments, removing every dart-define argument"
                )
                args[:] = [
                    arg for arg in args if not VscodeConfigWriter._is_define_arg(arg)
                ]
        return config

    @staticmethod
    def _is_define_arg(arg) -> bool:
        """True for "--dart-define" and "--dart-define=KEY=VALUE", not for other flags."""
        return isinstance(arg, str) and (
            arg == DART_DEFINE_FLAG or arg.startswith(DART_DEFINE_SEPARATOR)
        )

    @staticmethod
    def prettify_json(document: JsonValue) -> str:
        """Serialize with a fixed two-space indent."""
        return json.dumps(document, indent=JSON_INDENT, ensure_ascii=False)
