"""
Unit tests for the config module.

Covers:
- Successful loading of a valid config.toml
- Default fallbacks for missing values
- Error handling for missing files and invalid values
- Overlaying command-line values on a loaded configuration
"""
from pathlib import Path
from typing import Any

import pytest
import tomlkit
from pydantic import ValidationError

import photo_arrangement.config as pa_config
from photo_arrangement.config_defaults import (
    DEFAULT_FILL_MODE,
    DEFAULT_GAP_MM,
    DEFAULT_LAYOUT_MODE,
    DEFAULT_ORIENTATION,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SCALE_PERCENT,
)


@pytest.fixture
def write_toml(tmp_path: Path):
    """Write a dict as config.toml under tmp_path and return the path."""

    def _write(data: dict[str, Any]) -> str:
        doc = tomlkit.document()
        doc.update(data)
        path = tmp_path / "config.toml"
        path.write_text(tomlkit.dumps(doc), encoding="utf-8")
        return str(path)

    return _write


def test_load_valid_config(write_toml) -> None:
    """Test that a well-formed config.toml loads successfully."""
    path = write_toml({
        "page": {"orientation": "landscape"},
        "layout": {"mode": 6},
        "style": {"gap_mm": 2.5, "scale_percent": 90, "fill_mode": "cover"},
        "output": {"output_dir": "prints", "preview": True},
    })
    cfg = pa_config.ConfigLoader.load(path)

    assert cfg.page.orientation == "landscape"
    assert cfg.layout.mode == 6
    assert cfg.style.gap_mm == 2.5
    assert cfg.style.scale_percent == 90
    assert cfg.style.fill_mode == "cover"
    assert cfg.output.output_dir == "prints"
    assert cfg.output.preview is True
    assert cfg.output.export_pdf is True


def test_missing_sections_use_defaults(write_toml) -> None:
    cfg = pa_config.ConfigLoader.load(write_toml({"layout": {"mode": "auto"}}))

    assert cfg.page.orientation == DEFAULT_ORIENTATION
    assert cfg.layout.mode == DEFAULT_LAYOUT_MODE
    assert cfg.style.gap_mm == DEFAULT_GAP_MM
    assert cfg.style.scale_percent == DEFAULT_SCALE_PERCENT
    assert cfg.style.fill_mode == DEFAULT_FILL_MODE
    assert cfg.output.output_dir == DEFAULT_OUTPUT_DIR
    assert cfg.output.print_sheets is False


def test_repo_config_file_loads() -> None:
    repo_config = Path(__file__).resolve().parents[1] / "config.toml"
    cfg = pa_config.ConfigLoader.load(str(repo_config))
    assert cfg.layout.mode == "auto"


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        pa_config.ConfigLoader.load(str(tmp_path / "nope.toml"))


@pytest.mark.parametrize(
    "data",
    [
        {"page": {"orientation": "sideways"}},
        {"layout": {"mode": 0}},
        {"layout": {"mode": "many"}},
        {"style": {"gap_mm": -1}},
        {"style": {"scale_percent": 0}},
        {"style": {"fill_mode": "stretch"}},
    ],
)
def test_invalid_values_raise(write_toml, data: dict[str, Any]) -> None:
    with pytest.raises(ValidationError):
        pa_config.ConfigLoader.load(write_toml(data))


class TestBuildConfigFromCli:
    def test_defaults_without_base(self) -> None:
        cfg = pa_config.build_config_from_cli({})
        assert cfg == pa_config.ArrangementConfig()

    def test_cli_values_override_base(self, write_toml) -> None:
        base = pa_config.ConfigLoader.load(write_toml({
            "page": {"orientation": "landscape"},
            "style": {"gap_mm": 3},
        }))
        cfg = pa_config.build_config_from_cli(
            {"gap": 7.0, "layout": 4, "fill": "cover", "orientation": None},
            base_config=base,
        )
        assert cfg.page.orientation == "landscape"
        assert cfg.style.gap_mm == 7.0
        assert cfg.layout.mode == 4
        assert cfg.style.fill_mode == "cover"

    def test_switches(self) -> None:
        cfg = pa_config.build_config_from_cli(
            {"no_export": True, "preview": True, "print": False},
        )
        assert cfg.output.export_pdf is False
        assert cfg.output.preview is True
        assert cfg.output.print_sheets is False

    def test_base_is_not_mutated(self) -> None:
        base = pa_config.ArrangementConfig()
        pa_config.build_config_from_cli({"scale": 50.0}, base_config=base)
        assert base.style.scale_percent == DEFAULT_SCALE_PERCENT
