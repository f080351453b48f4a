"""Integration tests for the command-line interface."""

import io
import json

from linecalc_pkg.cli import main_entry


class TestCLI:
    def test_eval_human(self, capsys):
        assert main_entry(["-e", "200 * 50%"]) == 0
        assert capsys.readouterr().out == "1 | 200 * 50% | 100\n"

    def test_eval_escaped_newlines(self, capsys):
        assert main_entry(["-e", "1 + 2\\n* 3", "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [line["display"] for line in data["lines"]] == ["3", "9"]

    def test_error_marker_and_blank_lines(self, capsys):
        assert main_entry(["-e", "# title\n1/0"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "1 | # title"
        assert out[1].endswith("| ⚠")

    def test_file_input(self, tmp_path, capsys):
        doc = tmp_path / "notes.txt"
        doc.write_text("房租 = 3500\n水电 = 200\n房租 + 水电", encoding="utf-8")
        assert main_entry([str(doc), "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["lines"][2]["display"] == "3700"

    def test_stdin_input(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("1000 * 1000"))
        assert main_entry(["-"]) == 0
        assert capsys.readouterr().out.strip().endswith("1,000,000")

    def test_export_to_stdout(self, capsys):
        assert main_entry(["-e", "# rent\n1200 * 12", "--export"]) == 0
        assert capsys.readouterr().out == "# rent\n1200 * 12  →  14,400\n"

    def test_export_to_file(self, tmp_path, capsys):
        target = tmp_path / "out.txt"
        assert main_entry(["-e", "2 + 2", "-o", str(target)]) == 0
        assert target.read_text(encoding="utf-8") == "2 + 2  →  4\n"
        assert capsys.readouterr().out.strip() == str(target)

    def test_missing_file(self, tmp_path, capsys):
        assert main_entry([str(tmp_path / "missing.txt")]) == 1
        assert "cannot read" in capsys.readouterr().err

    def test_version(self, capsys):
        assert main_entry(["--version"]) == 0
        assert capsys.readouterr().out.startswith("linecalc ")
