"""Dart-define string and argument list handling for define_env."""

from functools import reduce

from .types import ArgsList, EnvDefines

DART_DEFINE_FLAG = "--dart-define"
DART_DEFINE_SEPARATOR = f"{DART_DEFINE_FLAG}="


class DefineListBuilder:
    """Builds dart-define strings and argument lists."""

    @staticmethod
    def build_define_string(defines: EnvDefines) -> str:
        """Render env entries as '--dart-define=KEY=VALUE ...'."""
        return " ".join(
            f"{DART_DEFINE_SEPARATOR}{key}={value}" for key, value in defines.items()
        )

    @staticmethod
    def build_define_list(define_string: str) -> ArgsList:
        """
        Split a dart-define string into the list form used by launch configs.

        ``"--dart-define=A=1 --dart-define=B=2"`` becomes
        ``["--dart-define", "A=1", "--dart-define", "B=2"]``. Text before the
        first separator is dropped, order is kept and duplicates are not merged.
        """
        segments = define_string.split(DART_DEFINE_SEPARATOR)[1:]
        args: ArgsList = []
        for segment in segments:
            args.extend([DART_DEFINE_FLAG, segment.strip()])
        return args

    @staticmethod
    def non_define_arguments(args: list) -> list:
        """
        Return the arguments of ``args`` that are not part of a dart-define pair.

        Useful for user arguments such as --profile or --release.
        """

        def step(acc: tuple[list, bool], arg) -> tuple[list, bool]:
            retained, previous_was_define = acc
            if arg == DART_DEFINE_FLAG:
                return retained, True
            if not previous_was_define:
                retained.append(arg)
            return retained, False

        retained, _ = reduce(step, args, ([], False))
        return retained
