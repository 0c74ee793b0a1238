import json
from pathlib import Path

import yaml
from click.testing import CliRunner

from extensible_enums.cli import extensible_enums


def test_cases_names_only():
    runner = CliRunner()
    result = runner.invoke(extensible_enums, ["cases", "sample_enums:Colors", "--names-only"])
    assert result.exit_code == 0, result.output
    assert result.output.split() == ["blue", "green", "red", "yellow"]


def test_cases_text_lists_values():
    runner = CliRunner()
    result = runner.invoke(extensible_enums, ["cases", "sample_enums.colors:Colors"])
    assert result.exit_code == 0, result.output
    assert "red = Color(r=255, g=0, b=0)" in result.output
    assert "yellow = Color(r=255, g=255, b=0)" in result.output


def test_cases_json():
    runner = CliRunner()
    result = runner.invoke(
        extensible_enums, ["cases", "sample_enums.shapes:Swatches", "--format", "json"]
    )
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "black": "(0, 0, 0)",
        "white": "(255, 255, 255)",
    }


def test_cases_yaml():
    runner = CliRunner()
    result = runner.invoke(
        extensible_enums, ["cases", "sample_enums:Shapes", "--format", "yaml"]
    )
    assert result.exit_code == 0, result.output
    assert yaml.safe_load(result.stdout) == {"square": "Shape(4)", "triangle": "Shape(3)"}


def test_describe_json():
    runner = CliRunner()
    result = runner.invoke(extensible_enums, ["describe", "sample_enums:Colors"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["payload_type"] == "Color"
    assert data["count"] == 4


def test_describe_yaml():
    runner = CliRunner()
    result = runner.invoke(
        extensible_enums, ["describe", "sample_enums:Swatches", "--format", "yaml"]
    )
    assert result.exit_code == 0, result.output
    data = yaml.safe_load(result.stdout)
    assert data["count"] == 2
    assert len(data["cases"]) == 3


def test_stub_to_stdout():
    runner = CliRunner()
    result = runner.invoke(extensible_enums, ["stub", "sample_enums.colors"])
    assert result.exit_code == 0, result.output
    assert "class Colors(ExtensibleEnum[Color]):" in result.output


def test_stub_to_file(tmp_path: Path):
    output = tmp_path / "shapes.pyi"
    runner = CliRunner()
    result = runner.invoke(
        extensible_enums, ["stub", "sample_enums.shapes:Shapes", "-o", str(output)]
    )
    assert result.exit_code == 0, result.output
    assert "Wrote stub" in result.output
    assert "square: ClassVar[Shape]" in output.read_text(encoding="utf-8")


def test_import_option_links_extension_modules():
    runner = CliRunner()
    result = runner.invoke(
        extensible_enums,
        [
            "cases",
            "sample_enums.colors:Colors",
            "--import",
            "sample_enums.colors_extension",
            "--names-only",
        ],
    )
    assert result.exit_code == 0, result.output
    assert "yellow" in result.output.split()


def test_unknown_target_is_usage_error():
    runner = CliRunner()
    result = runner.invoke(extensible_enums, ["cases", "sample_enums:Nope"])
    assert result.exit_code == 2
    assert "has no attribute" in result.output


def test_non_enumeration_target_is_usage_error():
    runner = CliRunner()
    result = runner.invoke(extensible_enums, ["describe", "sample_enums:Color"])
    assert result.exit_code == 2
    assert "not an ExtensibleEnum subclass" in result.output


def test_log_level_option_accepted():
    runner = CliRunner()
    result = runner.invoke(
        extensible_enums, ["--log-level", "error", "cases", "sample_enums:Colors"]
    )
    assert result.exit_code == 0, result.output
