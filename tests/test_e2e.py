"""End-to-end tests running define_env against a project on disk."""

import json

from define_env.application import Application


def read_launch(project):
    return (project / ".vscode" / "launch.json").read_text(encoding="utf-8")


class TestE2EVscode:
    """Test end-to-end launch.json updates"""

    def test_e2e_update_is_idempotent(self, temp_project, launch_config_scenarios):
        project = temp_project(
            env="API_URL=https://example.com\nFLAVOR=dev\n",
            launch=launch_config_scenarios["with_args"],
        )
        args = ["-p", str(project), "--vscode", "-c", "main"]

        assert Application().run(args) == 0
        first = read_launch(project)
        assert Application().run(args) == 0
        second = read_launch(project)

        assert first == second
        document = json.loads(second)
        assert document["configurations"][0]["args"] == [
            "--release",
            "x",
            "--dart-define",
            "API_URL=https://example.com",
            "--dart-define",
            "FLAVOR=dev",
        ]

    def test_e2e_env_change_replaces_defines(
        self, temp_project, launch_config_scenarios
    ):
        project = temp_project(env="A=1\n", launch=launch_config_scenarios["basic"])
        args = ["-p", str(project), "--vscode", "-c", "main"]
        Application().run(args)

        (project / ".env").write_text("B=2\n", encoding="utf-8")
        Application().run(args)

        document = json.loads(read_launch(project))
        assert document["configurations"][0]["args"] == ["--dart-define", "B=2"]

    def test_e2e_creates_named_configuration(
        self, temp_project, launch_config_scenarios
    ):
        project = temp_project(env="A=1\n", launch=launch_config_scenarios["empty"])

        result = Application().run(
            [
                "-p",
                str(project),
                "--vscode",
                "-c",
                "dev",
                "--program",
                "lib/main_dev.dart",
            ]
        )

        assert result == 0
        document = json.loads(read_launch(project))
        assert document["configurations"] == [
            {
                "name": "dev",
                "request": "launch",
                "type": "dart",
                "program": "lib/main_dev.dart",
                "args": ["--dart-define", "A=1"],
            }
        ]

    def test_e2e_comments_are_dropped(self, temp_project, launch_config_scenarios):
        project = temp_project(
            env="A=1\n", launch=launch_config_scenarios["with_comments"]
        )

        assert Application().run(["-p", str(project), "--vscode", "-c", "main"]) == 0

        content = read_launch(project)
        assert "//" not in content
        assert json.loads(content)["configurations"][0]["name"] == "main"

    def test_e2e_custom_env_file(self, temp_project, launch_config_scenarios):
        project = temp_project(launch=launch_config_scenarios["basic"])
        (project / ".env.staging").write_text("STAGE=staging\n", encoding="utf-8")

        result = Application().run(
            ["-p", str(project), "-e", ".env.staging", "--vscode", "-c", "main"]
        )

        assert result == 0
        document = json.loads(read_launch(project))
        assert document["configurations"][0]["args"] == [
            "--dart-define",
            "STAGE=staging",
        ]

    def test_e2e_print_only(self, temp_project, capsys):
        project = temp_project(env="A=1\nB=two words\n")

        assert Application().run(["-p", str(project)]) == 0

        assert (
            capsys.readouterr().out == "--dart-define=A=1 --dart-define=B=two words\n"
        )


class TestE2EErrors:
    """Test end-to-end error handling"""

    def test_e2e_missing_launch_json(self, temp_project, caplog):
        project = temp_project(env="A=1\n")

        assert Application().run(["-p", str(project), "--vscode"]) == 1
        assert "Config file not found" in caplog.text
        assert not (project / ".vscode").exists()

    def test_e2e_missing_env_file(self, temp_project, launch_config_scenarios, caplog):
        project = temp_project(launch=launch_config_scenarios["basic"])

        assert Application().run(["-p", str(project), "--vscode"]) == 1
        assert "Env file not found" in caplog.text
        assert read_launch(project) == launch_config_scenarios["basic"]

    def test_e2e_malformed_launch_json_untouched(self, temp_project, caplog):
        project = temp_project(env="A=1\n", launch='{"configurations": [')

        assert Application().run(["-p", str(project), "--vscode"]) == 1
        assert "Malformed launch config" in caplog.text
        assert read_launch(project) == '{"configurations": ['
