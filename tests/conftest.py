import json
from pathlib import Path

import pytest


def pytest_configure():
    """Add the src directory to the Python path before any tests run."""
    import sys
    from pathlib import Path

    # Add src directory to Python path
    src_dir = Path(__file__).parent.parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def launch_config_scenarios():
    """
    Fixture providing launch.json documents for common scenarios.

    Usage:
        def test_something(launch_config_scenarios):
            content = launch_config_scenarios["with_args"]
    """
    return {
        "empty": json.dumps({"version": "0.2.0", "configurations": []}, indent=2),
        "basic": json.dumps(
            {
                "version": "0.2.0",
                "configurations": [
                    {
                        "name": "main",
                        "request": "launch",
                        "type": "dart",
                        "program": "lib/main.dart",
                    }
                ],
            },
            indent=2,
        ),
        "with_args": json.dumps(
            {
                "version": "0.2.0",
                "configurations": [
                    {
                        "name": "main",
                        "request": "launch",
                        "type": "dart",
                        "args": ["--release", "--dart-define", "OLD=1", "x"],
                    },
                    {
                        "name": "profile",
                        "request": "launch",
                        "type": "dart",
                        "flutterMode": "profile",
                        "args": ["--dart-define", "OLD=2", "--profile"],
                    },
                ],
            },
            indent=2,
        ),
        "with_comments": (
            "{\n"
            '  // Use IntelliSense to learn about possible attributes.\n'
            '  "version": "0.2.0",\n'
            '  "configurations": [\n'
            "    {\n"
            '      "name": "main",\n'
            '      "request": "launch", // launch a new process\n'
            '      "type": "dart"\n'
            "    }\n"
            "  ]\n"
            "}\n"
        ),
    }


@pytest.fixture
def temp_project(tmp_path):
    """
    Fixture that creates a project directory with an env file and launch.json.

    Usage:
        def test_project(temp_project):
            project = temp_project(env="A=1\\n", launch='{"configurations": []}')
    """

    def _create_project(env: str | None = None, launch: str | None = None) -> Path:
        project = tmp_path / "project"
        project.mkdir(exist_ok=True)
        if env is not None:
            (project / ".env").write_text(env, encoding="utf-8")
        if launch is not None:
            vscode_dir = project / ".vscode"
            vscode_dir.mkdir(exist_ok=True)
            (vscode_dir / "launch.json").write_text(launch, encoding="utf-8")
        return project

    return _create_project


@pytest.fixture
def env_file_content():
    """Fixture providing env file contents."""
    return {
        "basic": "API_URL=https://example.com\nDEBUG=true\n",
        "with_comments": (
            "# Backend\n"
            "API_URL=https://example.com\n"
            "\n"
            "export FLAVOR=dev\n"
            'GREETING="hello world"\n'
        ),
        "empty": "",
    }


@pytest.fixture
def mock_debug_disabled(monkeypatch):
    """Fixture that makes sure debug output is off."""
    monkeypatch.delenv("DEFINE_ENV_DEBUG", raising=False)
