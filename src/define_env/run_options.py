"""Run options container for define_env."""

from typing import Optional


class RunOptions:
    """Class to hold the options of a single define_env run."""

    def __init__(
        self,
        project_path: str = ".",
        env_file: Optional[str] = None,
        config_name: Optional[str] = None,
        program_path: Optional[str] = None,
        vscode: bool = False,
        print_defines: bool = False,
    ):
        self.project_path = project_path
        self.env_file = env_file
        self.config_name = config_name
        self.program_path = program_path
        self.vscode = vscode
        self.print_defines = print_defines

    @property
    def has_writers(self) -> bool:
        """True when at least one IDE config should be updated."""
        return self.vscode

    def __eq__(self, other):
        if not isinstance(other, RunOptions):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self):
        fields = ", ".join(f"{key}={value!r}" for key, value in vars(self).items())
        return f"RunOptions({fields})"
