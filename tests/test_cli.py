"""
lispc CLI Tests
===============

Tests for the ``lispc`` command-line tool, driven through Click's
CliRunner.
"""

from click.testing import CliRunner

from lispc.cli.lispc import main
from lispc.cli.errors import ExitCode


class TestCLI:
    """Tests for the lispc CLI tool."""

    def test_cli_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Compile S-expressions" in result.output

    def test_cli_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_cli_expr(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-e", "(add 1 (subtract 2 3))"])

        assert result.exit_code == 0
        assert result.output == "add(1, subtract(2, 3));\n"

    def test_cli_stdin(self):
        runner = CliRunner()
        result = runner.invoke(main, [], input="(add 1 2)\n(subtract 3 4)\n")

        assert result.exit_code == 0
        assert result.output == "add(1, 2);\nsubtract(3, 4);\n"

    def test_cli_stdin_no_deprecation_warning(self, recwarn):
        runner = CliRunner()
        result = runner.invoke(main, [], input="(f 1)\n")

        assert result.exit_code == 0
        assert result.output == "f(1);\n"
        assert not [w for w in recwarn if issubclass(w.category, DeprecationWarning)]

    def test_cli_empty_input(self):
        runner = CliRunner()
        result = runner.invoke(main, [], input="")

        assert result.exit_code == 0
        assert result.output == ""

    def test_cli_file_to_output(self, tmp_path):
        source_file = tmp_path / "demo.lisp"
        source_file.write_text("(add 1 2)\n")
        output_file = tmp_path / "demo.c"

        runner = CliRunner()
        result = runner.invoke(main, [str(source_file), "-o", str(output_file)])

        assert result.exit_code == 0
        assert output_file.read_text() == "add(1, 2);\n"

    def test_cli_tokens(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--tokens", "-e", "(f 1)"])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "Token(PAREN, '(', 1:1)",
            "Token(IDENTIFIER, 'f', 1:2)",
            "Token(NUMBER, '1', 1:4)",
            "Token(PAREN, ')', 1:5)",
        ]

    def test_cli_ast(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--ast", "-e", "(add 1 (neg 2))"])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "Program",
            "  CallExpression add",
            "    NumberLiteral 1",
            "    CallExpression neg",
            "      NumberLiteral 2",
        ]

    def test_cli_ast_does_not_transform(self):
        """--ast stops after parsing, so a bare literal is still printable."""
        runner = CliRunner()
        result = runner.invoke(main, ["--ast", "-e", "42"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["Program", "  NumberLiteral 42"]

    def test_cli_deep_nesting(self):
        depth = 1000
        runner = CliRunner()
        result = runner.invoke(main, ["-e", "(f " * depth + "1" + ")" * depth])

        assert result.exit_code == 0
        assert result.output == "f(" * depth + "1" + ")" * depth + ";\n"

    def test_cli_ast_deep_nesting(self):
        depth = 1000
        runner = CliRunner()
        result = runner.invoke(main, ["--ast", "-e", "(f " * depth + "1" + ")" * depth])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == depth + 2
        assert lines[-1] == "  " * (depth + 1) + "NumberLiteral 1"

    def test_cli_c_ast(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--c-ast", "-e", "(add 1)"])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "Program",
            "  ExpressionStatement",
            "    CallExpression",
            "      Identifier add",
            "      NumberLiteral 1",
        ]

    def test_cli_parse_error(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-e", "(add 1"])

        assert result.exit_code == ExitCode.COMPILE_ERROR
        assert "parse error: unexpected end of input" in result.output

    def test_cli_transform_error(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-e", "42"])

        assert result.exit_code == ExitCode.COMPILE_ERROR
        assert "transform error" in result.output

    def test_cli_lex_error(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-e", "(add 1 @)"])

        assert result.exit_code == ExitCode.COMPILE_ERROR
        assert "<expr>:1:8: error: lex error" in result.output

    def test_cli_file_and_expr_conflict(self, tmp_path):
        source_file = tmp_path / "demo.lisp"
        source_file.write_text("(f)")

        runner = CliRunner()
        result = runner.invoke(main, [str(source_file), "-e", "(g)"])

        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_cli_missing_file(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, [str(tmp_path / "missing.lisp")])

        assert result.exit_code != 0
