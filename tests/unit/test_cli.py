"""
Unit tests for the command-line interface.
"""

import io

import pytest
from dharma import __version__
from dharma.cli import create_parser, main


class TestCreateParser:
    """Tests for argument parsing."""

    def test_run_defaults_to_stdin(self):
        args = create_parser().parse_args(["run"])
        assert args.command == "run"
        assert args.input == "-"
        assert not args.verbose

    def test_parse_format(self):
        args = create_parser().parse_args(["parse", "prog.dh", "--format", "source"])
        assert args.input == "prog.dh"
        assert args.format == "source"

    def test_interactive_flag(self):
        args = create_parser().parse_args(["-i"])
        assert args.interactive


class TestMain:
    """Tests for the main entry point."""

    def test_run_file(self, sample_program_file, capsys):
        assert main(["run", str(sample_program_file)]) == 0
        assert capsys.readouterr().out == "12\n"

    def test_run_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("(2+3)"))
        assert main(["run"]) == 0
        assert capsys.readouterr().out == "5\n"

    def test_run_empty_program(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        assert main(["run", "-"]) == 1
        assert "No top-level expression" in capsys.readouterr().err

    def test_run_malformed(self, temp_dir, capsys):
        program = temp_dir / "bad.dh"
        program.write_text("(3 4)")
        assert main(["run", str(program)]) == 1
        assert "Missing operator" in capsys.readouterr().err

    def test_run_missing_file(self, temp_dir, capsys):
        assert main(["run", str(temp_dir / "absent.dh")]) == 1
        assert "Input file not found" in capsys.readouterr().err

    def test_parse_tree(self, sample_program_file, capsys):
        assert main(["parse", str(sample_program_file)]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "Parenthesized(MULTIPLY)"

    def test_parse_source(self, sample_program_file, capsys):
        assert main(["parse", str(sample_program_file), "--format", "source"]) == 0
        assert capsys.readouterr().out == "((1+2)*4)\n"

    def test_parse_error(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("(1+"))
        assert main(["parse"]) == 1
        assert "Missing expression" in capsys.readouterr().err

    def test_tokens(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("(1"))
        assert main(["tokens"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "1:0\tLPAR\t'('",
            "1:1\tDIGIT\t'1'",
            "1:2\tEND_OF_INPUT\t'#'",
        ]

    def test_shell_command(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("(2*4)\nexit\n"))
        assert main(["shell"]) == 0
        assert "8\n" in capsys.readouterr().out

    def test_version(self, capsys):
        assert main(["version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_no_command(self, capsys):
        assert main([]) == 2
        assert "usage" in capsys.readouterr().out


class TestMainInputErrors:
    """Tests for unreadable or unusable input files."""

    @pytest.fixture
    def invalid_utf8(self, temp_dir):
        program = temp_dir / "bad.dh"
        program.write_bytes(b"(1+\xff)")
        return program

    @pytest.mark.parametrize("command", ["run", "parse", "tokens"])
    def test_invalid_utf8(self, invalid_utf8, command, capsys):
        assert main([command, str(invalid_utf8)]) == 1
        assert "Read error" in capsys.readouterr().err

    @pytest.mark.parametrize("command", ["run", "parse", "tokens"])
    def test_directory(self, temp_dir, command, capsys):
        assert main([command, str(temp_dir)]) == 1
        assert "Cannot read input file" in capsys.readouterr().err

    def test_parse_deep_nesting(self, temp_dir, capsys):
        program = temp_dir / "deep.dh"
        program.write_text("(" * 5000 + "1" + "+1)" * 5000)
        assert main(["parse", str(program)]) == 1
        assert "Expression nested too deeply" in capsys.readouterr().err

    def test_version_verbose(self, capsys):
        assert main(["version", "-v"]) == 0
        assert __version__ in capsys.readouterr().out
