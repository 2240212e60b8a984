#!/usr/bin/env python3
"""Main application orchestrator for define_env."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config_writer import ConfigWriter
from .define_list import DefineListBuilder
from .env_reader import EnvFileReader
from .environment_helper import EnvironmentHelper, debug_log
from .exceptions import DefineEnvError
from .path_helper import PathHelper
from .run_options import RunOptions
from .types import ArgsList, ExitCode
from .vscode_config_writer import VscodeConfigWriter

DESCRIPTION = """define_env - .env to --dart-define
Reads KEY=VALUE entries from an env file and prints them as
'--dart-define=KEY=VALUE' arguments, or writes them into the IDE
launch configuration of a Flutter/Dart project.
"""

EPILOG = """examples:
  define_env                                  # print the dart-define string
  define_env --vscode                         # update .vscode/launch.json
  define_env --vscode -c dev --program lib/main_dev.dart

  Set DEFINE_ENV_FILE to change the default env file and
  DEFINE_ENV_DEBUG=1 for debug output.
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="define_env",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-p",
        "--project-path",
        default=".",
        help="Path to the project directory (default: current directory)",
    )
    parser.add_argument(
        "-e",
        "--env-file",
        default=None,
        help="Env file, relative to the project directory (default: .env)",
    )
    parser.add_argument(
        "-c",
        "--config-name",
        default=None,
        help="Launch configuration to create if it does not exist",
    )
    parser.add_argument(
        "--program",
        dest="program_path",
        default=None,
        help="Program path used when a launch configuration is created",
    )
    parser.add_argument(
        "--vscode",
        action="store_true",
        help="Write the defines into .vscode/launch.json",
    )
    parser.add_argument(
        "--print",
        dest="print_defines",
        action="store_true",
        help="Print the dart-define string (default when no IDE is selected)",
    )
    return parser


class Application:
    """Main application orchestrator."""

    def __init__(
        self,
        env_reader: Optional[EnvFileReader] = None,
        writer_classes: Optional[dict[str, type[ConfigWriter]]] = None,
    ):
        self.env_reader = env_reader or EnvFileReader()
        self.writer_classes = writer_classes or {"vscode": VscodeConfigWriter}

    @staticmethod
    def parse_options(args: ArgsList) -> RunOptions:
        """Parse command line arguments into RunOptions."""
        namespace = build_parser().parse_args(args)
        return RunOptions(
            project_path=namespace.project_path,
            env_file=namespace.env_file,
            config_name=namespace.config_name,
            program_path=namespace.program_path,
            vscode=namespace.vscode,
            print_defines=namespace.print_defines,
        )

    def run(self, args: ArgsList) -> ExitCode:
        """Run the application with the given arguments."""
        try:
            options = self.parse_options(args)
        except SystemExit as e:
            # argparse exits on --help and on usage errors
            return e.code if isinstance(e.code, int) else 1

        debug_log(f"run: options={options}")

        try:
            self._run(options)
        except DefineEnvError as e:
            logging.error(str(e))
            return 1
        return 0

    def _run(self, options: RunOptions) -> None:
        project_path = PathHelper.resolve_project_path(options.project_path)
        env_file = PathHelper.resolve_env_file(
            project_path, options.env_file or EnvironmentHelper.get_default_env_file()
        )

        defines = self.env_reader.load_env_file(env_file)
        define_string = DefineListBuilder.build_define_string(defines)

        if options.print_defines or not options.has_writers:
            print(define_string)

        for writer in self.create_writers(options, project_path, define_string):
            for path in writer.update():
                print(f"Updated {path}", file=sys.stderr)

    def create_writers(
        self, options: RunOptions, project_path: Path, define_string: str
    ) -> list[ConfigWriter]:
        """Create the config writers selected in ``options``."""
        selected = {"vscode": options.vscode}
        return [
            writer_class(
                project_path=project_path,
                define_string=define_string,
                config_name=options.config_name,
                program_path=options.program_path,
            )
            for name, writer_class in self.writer_classes.items()
            if selected.get(name)
        ]


def main() -> ExitCode:
    """Main entry point."""
    try:
        app = Application()
        return app.run(sys.argv[1:])
    except DefineEnvError as e:
        logging.error(str(e))
        return 1
    except Exception as e:
        logging.error(f"Unexpected error: {e}")
        return 1
