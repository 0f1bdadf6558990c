import json
from pathlib import Path

from typer.testing import CliRunner

from aspectfit.cli import app
from aspectfit.constants import PREVIEW_HTML_NAME, PREVIEW_PNG_NAME

runner = CliRunner()


def test_compute_defaults() -> None:
    result = runner.invoke(app, ["compute"])
    assert result.exit_code == 0
    assert "1,216 x 896 (1,089,536 px)" in result.stdout
    assert "1.357 (19:14)" in result.stdout


def test_compute_preset() -> None:
    result = runner.invoke(app, ["compute", "--preset", "16:9"])
    assert result.exit_code == 0
    assert "1,376 x 784 (1,078,784 px)" in result.stdout
    assert "Preview     220 x 125" in result.stdout


def test_compute_unconfigured_preset_label() -> None:
    result = runner.invoke(app, ["compute", "--preset", "7:5", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["ratio"] == 1.4


def test_compute_ratio_json() -> None:
    result = runner.invoke(app, ["compute", "--ratio", "1.7777", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["resolution"] == {"width": 1376, "height": 784, "pixels": 1_078_784}
    assert data["ratio_label"] == {"numerator": 16, "denominator": 9}


def test_compute_bad_preset() -> None:
    result = runner.invoke(app, ["compute", "--preset", "widescreen"])
    assert result.exit_code == 1


def test_compute_invalid_base() -> None:
    result = runner.invoke(app, ["compute", "--width", "abc"])
    assert result.exit_code == 0
    assert "Range       disabled" in result.stdout
    assert "Result      0 x 0 (0 px)" in result.stdout


def test_compute_legacy() -> None:
    result = runner.invoke(
        app, ["compute", "--legacy", "--width", "1920", "--height", "1080", "--ratio", "1.0"]
    )
    assert result.exit_code == 0
    assert "1,440 x 1,440" in result.stdout


def test_compute_step_override() -> None:
    result = runner.invoke(app, ["compute", "--step", "64", "--width", "1000", "--height", "1000"])
    assert result.exit_code == 0
    assert "Base        960 x 960" in result.stdout


def test_compute_with_config(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("default_width: 1024\ndefault_height: 1024\n")
    result = runner.invoke(app, ["compute", "--config", str(config)])
    assert result.exit_code == 0
    assert "1,024 x 1,024" in result.stdout


def test_compute_with_invalid_config(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("step: 0\n")
    result = runner.invoke(app, ["compute", "--config", str(config)])
    assert result.exit_code == 1


def test_presets_lists_fits() -> None:
    result = runner.invoke(app, ["presets"])
    assert result.exit_code == 0
    assert "16:9  1,376 x 784 (1,078,784 px)" in result.stdout
    assert "1:1" in result.stdout


def test_presets_invalid_base() -> None:
    result = runner.invoke(app, ["presets", "--width", "0"])
    assert result.exit_code == 1


def test_preview_writes_files(tmp_path: Path) -> None:
    result = runner.invoke(app, ["preview", "--preset", "4:3", "--output", str(tmp_path)])
    assert result.exit_code == 0
    assert (tmp_path / PREVIEW_HTML_NAME).exists()
    assert (tmp_path / PREVIEW_PNG_NAME).exists()
    assert "4:3" in (tmp_path / PREVIEW_HTML_NAME).read_text(encoding="utf-8")


def test_config_validate(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("step: 8\n")
    result = runner.invoke(app, ["config", "validate", str(config)])
    assert result.exit_code == 0
    assert "Config valid" in result.stdout


def test_config_validate_rejects_bad_preset(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("presets: ['wide']\n")
    result = runner.invoke(app, ["config", "validate", str(config)])
    assert result.exit_code == 1


def test_config_wizard(tmp_path: Path) -> None:
    dst = tmp_path / "config.yaml"
    result = runner.invoke(
        app, ["config", "wizard", str(dst)], input="1920\n1080\n8\nn\n16:9, 4:3\n"
    )
    assert result.exit_code == 0
    text = dst.read_text(encoding="utf-8")
    assert "step: 8" in text
    assert "default_width: 1920" in text
