import json

import pytest

from graph_puzzle.cli import main, parse_args, resolve_settings


@pytest.fixture
def puzzle_path(tmp_path):
    path = tmp_path / "puzzle.json"
    path.write_text(
        json.dumps({"node_count": 1, "modulus": 4, "edges": [[0, 0]], "initial": [0], "goal": [3]}),
        encoding="utf-8",
    )
    return str(path)


class TestArguments:
    def test_cap_flags_are_exclusive(self):
        with pytest.raises(SystemExit):
            parse_args(["--max-iterations", "5", "--unbounded"])

    def test_negative_cap_is_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--max-iterations", "-1"])

    def test_flags_override_settings(self):
        settings = resolve_settings(parse_args(["--max-iterations", "12", "--no-self-loops", "--log-level", "info"]))
        assert settings.iteration_cap == 12
        assert settings.add_self_loops is False
        assert settings.log_level == "INFO"

    def test_unknown_log_level_is_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--log-level", "LOUD"])

    @pytest.mark.parametrize("argv", [["--unbounded"], ["--max-iterations", "0"]])
    def test_unbounded_search(self, argv):
        assert resolve_settings(parse_args(argv)).iteration_cap is None


class TestMain:
    def test_prints_steps_and_saves_artifact(self, tmp_path, puzzle_path, capsys):
        output_path = tmp_path / "out" / "solution.json"
        exit_code = main(["--input-path", puzzle_path, "--output-path", str(output_path)])
        assert exit_code == 0

        printed = capsys.readouterr().out
        assert "Solution found! Moves required: 3" in printed
        assert "After incrementing node 0: 3" in printed

        artifact = json.loads(output_path.read_text(encoding="utf-8"))
        assert artifact["report"]["moves"] == [0, 0, 0]
        assert artifact["meta"]["input_path"] == puzzle_path

    def test_aborted_search_exit_code(self, puzzle_path, capsys):
        assert main(["--input-path", puzzle_path, "--max-iterations", "2"]) == 1
        assert "Raise the iteration cap" in capsys.readouterr().out

    def test_explicit_loop_survives_no_self_loops(self, puzzle_path):
        assert main(["--input-path", puzzle_path, "--no-self-loops"]) == 0

    def test_unreachable_exit_code(self, tmp_path, capsys):
        path = tmp_path / "stuck.json"
        path.write_text(json.dumps({"modulus": 3, "edges": [], "initial": [0], "goal": [1]}), encoding="utf-8")
        assert main(["--input-path", str(path), "--no-self-loops"]) == 1
        assert "No solution found" in capsys.readouterr().out

    def test_invalid_puzzle_exit_code(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"modulus": 2, "initial": [0], "goal": [2]}), encoding="utf-8")
        assert main(["--input-path", str(path)]) == 2
        assert "Error generating solution" in capsys.readouterr().out
