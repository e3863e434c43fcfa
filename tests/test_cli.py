# =============================================================================
# test_cli.py - hackasm Command-Line Tests
# =============================================================================
# Tests for the hackasm CLI tool, run through click's CliRunner.
#
# Test coverage includes:
#   - Help and version output
#   - Default and explicit output paths
#   - Several input files in one run
#   - Symbol and listing files
#   - Exit codes for assembly errors, bad arguments and bad input
#   - Output write failures
# =============================================================================

from click.testing import CliRunner

from hack_asm.cli.errors import ExitCode
from hack_asm.cli.hackasm import main


ADD_SOURCE = """\
// R0 = 2 + 3
@2
D=A
@3
D=D+A
@0
M=D
"""

ADD_HACK = """\
0000000000000010
1110110000010000
0000000000000011
1110000010010000
0000000000000000
1110001100001000
"""


class TestHackasmCLI:
    """Tests for the hackasm CLI tool."""

    def test_cli_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Assemble Hack assembly programs" in result.output

    def test_cli_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "hackasm" in result.output

    def test_cli_requires_input(self):
        runner = CliRunner()
        result = runner.invoke(main, [])

        assert result.exit_code == 2

    def test_cli_default_output(self, tmp_path):
        source = tmp_path / "Add.asm"
        source.write_text(ADD_SOURCE)

        runner = CliRunner()
        result = runner.invoke(main, [str(source)])

        assert result.exit_code == 0
        assert (tmp_path / "Add.hack").read_text() == ADD_HACK

    def test_cli_explicit_output(self, tmp_path):
        source = tmp_path / "Add.asm"
        source.write_text(ADD_SOURCE)
        output = tmp_path / "out.hack"

        runner = CliRunner()
        result = runner.invoke(main, [str(source), "-o", str(output)])

        assert result.exit_code == 0
        assert output.read_text() == ADD_HACK
        assert not (tmp_path / "Add.hack").exists()

    def test_cli_several_inputs(self, tmp_path):
        first = tmp_path / "First.asm"
        first.write_text("@a\n@b\n")
        second = tmp_path / "Second.asm"
        second.write_text("@b\n")

        runner = CliRunner()
        result = runner.invoke(main, [str(first), str(second)])

        assert result.exit_code == 0
        assert (tmp_path / "First.hack").read_text() == (
            "0000000000010000\n0000000000010001\n"
        )
        # Variables restart at 16 for each program
        assert (tmp_path / "Second.hack").read_text() == "0000000000010000\n"

    def test_cli_symbols_and_listing(self, tmp_path):
        source = tmp_path / "Loop.asm"
        source.write_text("(LOOP)\n@i\n@LOOP\n0;JMP\n")
        symbols = tmp_path / "Loop.sym"
        listing = tmp_path / "Loop.lst"

        runner = CliRunner()
        result = runner.invoke(
            main, [str(source), "-s", str(symbols), "-l", str(listing), "-v"]
        )

        assert result.exit_code == 0
        assert "LOOP 0" in symbols.read_text().splitlines()
        assert "I 16" in symbols.read_text().splitlines()
        assert "1110101010000111" in listing.read_text()
        assert "Wrote 3 instructions" in result.output

    def test_cli_output_needs_single_input(self, tmp_path):
        first = tmp_path / "A.asm"
        first.write_text("@1\n")
        second = tmp_path / "B.asm"
        second.write_text("@2\n")

        runner = CliRunner()
        result = runner.invoke(
            main, [str(first), str(second), "-o", str(tmp_path / "x.hack")]
        )

        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_cli_assembly_error(self, tmp_path):
        source = tmp_path / "Bad.asm"
        source.write_text("@1\nD=D*2\n")

        runner = CliRunner()
        result = runner.invoke(main, [str(source)])

        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "unknown comp mnemonic 'D*2'" in result.output
        assert not (tmp_path / "Bad.hack").exists()

    def test_cli_error_does_not_stop_other_files(self, tmp_path):
        bad = tmp_path / "Bad.asm"
        bad.write_text("what\n")
        good = tmp_path / "Good.asm"
        good.write_text("@7\n")

        runner = CliRunner()
        result = runner.invoke(main, [str(bad), str(good)])

        assert result.exit_code == ExitCode.BUILD_ERROR
        assert (tmp_path / "Good.hack").read_text() == "0000000000000111\n"
        assert not (tmp_path / "Bad.hack").exists()

    def test_cli_output_suffix_from_env(self, tmp_path):
        source = tmp_path / "Add.asm"
        source.write_text(ADD_SOURCE)

        runner = CliRunner()
        result = runner.invoke(
            main, [str(source)], env={"HACKASM_OUTPUT_SUFFIX": ".bin"}
        )

        assert result.exit_code == 0
        assert (tmp_path / "Add.bin").read_text() == ADD_HACK

    def test_cli_undecodable_input_does_not_stop_other_files(self, tmp_path):
        bad = tmp_path / "Latin.asm"
        bad.write_bytes(b"@1\n\xff\xfe\n")
        good = tmp_path / "Good.asm"
        good.write_text("@7\n")

        runner = CliRunner()
        result = runner.invoke(main, [str(bad), str(good)])

        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "not valid utf-8 text" in result.output
        assert "Internal error" not in result.output
        assert (tmp_path / "Good.hack").read_text() == "0000000000000111\n"
        assert not (tmp_path / "Latin.hack").exists()

    def test_cli_worst_exit_code_wins(self, tmp_path):
        bad_bytes = tmp_path / "Latin.asm"
        bad_bytes.write_bytes(b"\xff\n")
        bad_asm = tmp_path / "Bad.asm"
        bad_asm.write_text("what\n")

        runner = CliRunner()
        result = runner.invoke(main, [str(bad_asm), str(bad_bytes)])

        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "Assembly error" in result.output

    def test_cli_unknown_encoding_from_env(self, tmp_path):
        source = tmp_path / "Add.asm"
        source.write_text(ADD_SOURCE)

        runner = CliRunner()
        result = runner.invoke(
            main, [str(source)], env={"HACKASM_ENCODING": "no-such-codec"}
        )

        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "no-such-codec" in result.output

    def test_cli_output_write_failure(self, tmp_path):
        source = tmp_path / "Add.asm"
        source.write_text(ADD_SOURCE)
        output = tmp_path / "missing" / "Add.hack"

        runner = CliRunner()
        result = runner.invoke(main, [str(source), "-o", str(output)])

        assert result.exit_code == ExitCode.OUTPUT_ERROR
        assert "cannot write" in result.output
        assert "Internal error" not in result.output
