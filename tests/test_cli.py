"""
Tests for the command line entry point.

Focus on reading payloads and output modes.
"""

import io
import json
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from league_standings.__main__ import main, parse_args, args_to_typed


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """main() reconfigures loguru; put the default handler back afterwards."""
    yield
    logger.remove()
    _ = logger.add(sys.stderr)


def write_results(tmp_path: Path, payload: str) -> Path:
    path = tmp_path / "results.json"
    _ = path.write_text(payload, encoding="utf-8")
    return path


class TestCLI:
    """Test CLI behavior through main()."""

    def test_defaults(self) -> None:
        args = args_to_typed(parse_args(["results.json"]))

        assert args["win_points"] == 3
        assert args["draw_points"] == 1
        assert args["loss_points"] == 0
        assert not args["strict"]

    def test_json_output(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = write_results(tmp_path, '{"A": {"B": [3, 0]}, "B": {"C": [1, 1]}}')

        main([str(path), "--json"])

        assert json.loads(capsys.readouterr().out) == [["A", 3], ["B", 1], ["C", 1]]

    def test_table_output(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = write_results(tmp_path, '{"Alice": {"Bob": [1, 3]}}')

        main([str(path)])

        out = capsys.readouterr().out
        assert "Participant" in out
        assert "Bob" in out
        assert "Alice" not in out

    def test_custom_points(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = write_results(tmp_path, '{"Alice": {"Bob": [1, 0]}}')

        main([str(path), "--json", "--win-points", "2"])

        assert json.loads(capsys.readouterr().out) == [["Alice", 2]]

    def test_reads_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO('{"A": {"B": [0, 0]}}'))

        main(["-", "--json"])

        assert json.loads(capsys.readouterr().out) == [["A", 1], ["B", 1]]

    def test_bad_payload_prints_empty_standings(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = write_results(tmp_path, "not json")

        main([str(path), "--json"])

        assert capsys.readouterr().out.strip() == "[]"

    def test_strict_bad_payload_exits(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = write_results(tmp_path, '{"A": {"B": [1]}}')

        with pytest.raises(SystemExit) as exc_info:
            main([str(path), "--strict"])

        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().out

    def test_missing_file_exits(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "missing.json")])

        assert exc_info.value.code == 1

    def test_negative_points_exit(self, tmp_path: Path) -> None:
        path = write_results(tmp_path, "{}")

        with pytest.raises(SystemExit) as exc_info:
            main([str(path), "--draw-points", "-1"])

        assert exc_info.value.code == 1

    def test_grid_output(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = write_results(tmp_path, '{"A": {"B": [3, 2]}, "B": {"A": [2, 3]}}')

        main([str(path), "--grid", "--json"])

        lines = capsys.readouterr().out.strip().splitlines()
        grid = "\n".join(lines[:-1])
        assert "3 - 2" in grid
        assert "2 - 3" in grid
        assert json.loads(lines[-1]) == [["A", 6]]
