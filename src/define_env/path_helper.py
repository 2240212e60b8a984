"""Path operations for define_env."""

from pathlib import Path

from .exceptions import ProjectNotFoundError

VSCODE_DIR = ".vscode"
LAUNCH_CONFIG_FILE = "launch.json"


class PathHelper:
    """Utility class for path operations."""

    @staticmethod
    def resolve_project_path(project_path: str | Path) -> Path:
        """Resolve the project directory, which must exist."""
        path = Path(project_path).expanduser().resolve()
        if not path.is_dir():
            raise ProjectNotFoundError(str(path))
        return path

    @staticmethod
    def resolve_env_file(project_path: Path, env_file: str | Path) -> Path:
        """Resolve the env file, relative paths are taken from the project directory."""
        path = Path(env_file).expanduser()
        if not path.is_absolute():
            path = project_path / path
        return path

    @staticmethod
    def launch_config_path(project_path: Path) -> Path:
        """Get the path to the VS Code launch configuration of a project."""
        return Path(project_path) / VSCODE_DIR / LAUNCH_CONFIG_FILE
