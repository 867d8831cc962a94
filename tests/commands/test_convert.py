"""Tests for the 'erb-num2name convert' command.

Integration tests using CliRunner.
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from erb_num2name import __version__
from erb_num2name.cli import app
from erb_num2name.core.textio import BOM

runner = CliRunner()


def _read(path: Path) -> str:
    return path.read_bytes()[len(BOM) :].decode("utf-8")


class TestConvertCommand:
    """Tests for the convert command."""

    def test_converts_target(self, game_dir: Path) -> None:
        result = runner.invoke(app, ["convert", "-t", str(game_dir)])

        assert result.exit_code == 0, result.output
        assert "converted: 2" in result.output
        assert "ABL:C-sense" in _read(game_dir / "ERB" / "SYSTEM.ERB")

    def test_include_exclude_options(self, game_dir: Path) -> None:
        result = runner.invoke(
            app,
            ["convert", "-t", str(game_dir), "-i", "ITEM", "-e", "ABL", "--explicit-target"],
        )

        assert result.exit_code == 0, result.output
        assert _read(game_dir / "ERB" / "sub" / "train.erb") == "ITEM:Potion\r\nABLNAME:1\r\n"

    def test_normalize_options(self, game_dir: Path, write_bom_file) -> None:
        write_bom_file(game_dir / "CSV" / "Abl.csv", "0,C sense (x)\n")
        result = runner.invoke(
            app,
            ["convert", "-t", str(game_dir), "--normalize", "--space-policy", "underscore"],
        )

        assert result.exit_code == 0, result.output
        assert "ABL:C_sense___x += 1" in _read(game_dir / "ERB" / "SYSTEM.ERB")

    def test_missing_target_option(self) -> None:
        result = runner.invoke(app, ["convert"])
        assert result.exit_code == 2
        assert "--target" in result.output

    def test_nonexistent_target(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["convert", "-t", str(tmp_path / "nope")])
        assert result.exit_code == 2
        assert "does not exist" in result.output

    def test_bad_regex_file_is_config_error(self, game_dir: Path) -> None:
        rules = game_dir / "rules.yaml"
        rules.write_text("regex: not-a-list\n")

        result = runner.invoke(
            app, ["convert", "-t", str(game_dir), "--erb-regex-path", str(rules)]
        )

        assert result.exit_code == 2
        assert "expected a list" in result.output

    def test_bad_template_escape_is_config_error(self, game_dir: Path) -> None:
        rules = game_dir / "rules.yaml"
        rules.write_text("- regex: 'ABL'\n  replace: '\\q'\n")
        before = (game_dir / "ERB" / "SYSTEM.ERB").read_bytes()

        result = runner.invoke(
            app, ["convert", "-t", str(game_dir), "--erb-regex-path", str(rules)]
        )

        assert result.exit_code == 2
        assert "rewrite rule #1" in result.output
        assert (game_dir / "ERB" / "SYSTEM.ERB").read_bytes() == before

    def test_failures_lenient_by_default(self, game_dir: Path) -> None:
        (game_dir / "ERB" / "BAD.ERB").write_bytes(BOM + b"\xff")

        result = runner.invoke(app, ["convert", "-t", str(game_dir)])

        assert result.exit_code == 0
        assert "failed: 1" in result.output

    def test_failures_strict(self, game_dir: Path) -> None:
        (game_dir / "ERB" / "BAD.ERB").write_bytes(BOM + b"\xff")

        result = runner.invoke(app, ["convert", "-t", str(game_dir), "--strict"])

        assert result.exit_code == 1

    def test_config_file(self, game_dir: Path) -> None:
        config = game_dir.parent / "erb-num2name.yaml"
        config.write_text("target: game\nincludes: [ITEM]\n")

        result = runner.invoke(app, ["convert", "--config", str(config)])

        assert result.exit_code == 0, result.output
        assert _read(game_dir / "ERB" / "sub" / "train.erb").startswith("ITEM:Potion")

    def test_cli_overrides_config_file(self, game_dir: Path) -> None:
        config = game_dir.parent / "erb-num2name.yaml"
        config.write_text("target: game\nstrict: true\n")
        (game_dir / "ERB" / "BAD.ERB").write_bytes(BOM + b"\xff")

        result = runner.invoke(app, ["convert", "-c", str(config), "--lenient"])

        assert result.exit_code == 0

    @patch("erb_num2name.commands.convert._setup_logging")
    def test_verbose_flag_setup_logging(
        self, mock_setup_logging: MagicMock, game_dir: Path
    ) -> None:
        result = runner.invoke(app, ["convert", "-t", str(game_dir), "--verbose"])

        assert result.exit_code == 0
        mock_setup_logging.assert_called_once_with(verbose=True, quiet=False)


class TestAppOptions:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_args_shows_help(self) -> None:
        result = runner.invoke(app, [])
        assert "convert" in result.output
