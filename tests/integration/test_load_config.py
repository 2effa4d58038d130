from __future__ import annotations

from pathlib import Path

import pytest

from util.utils import config_section, load_config


@pytest.mark.integration
def test_load_config_reads_repository_defaults() -> None:
    cfg = load_config()
    assert config_section(cfg, "display").get("frame_delay_ms") == 30
    assert config_section(cfg, "shading").get("ramp") == "ascii"
    assert config_section(cfg, "hud").get("order") == ["Frame", "FPS", "Roll", "Yaw"]


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_root_config_overrides_top_level_sections(tmp_path: Path) -> None:
    _write(tmp_path / "configs" / "default.yaml", "run:\n  duration: 5s\nhud:\n  enabled: true\n")
    _write(tmp_path / "config.yaml", "run:\n  duration: 2s\n")
    cfg = load_config(tmp_path)
    assert cfg["run"] == {"duration": "2s"}
    assert cfg["hud"] == {"enabled": True}


def test_missing_files_give_empty_config(tmp_path: Path) -> None:
    assert load_config(tmp_path) == {}


def test_broken_yaml_is_ignored(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    _write(tmp_path / "configs" / "default.yaml", "run: [unclosed\n")
    _write(tmp_path / "config.yaml", "- just\n- a list\n")
    with caplog.at_level("WARNING", logger="util.utils"):
        assert load_config(tmp_path) == {}
    assert "failed to load config" in caplog.text


def test_config_section_tolerates_bad_shapes() -> None:
    assert config_section({"run": "5s"}, "run") == {}
    assert config_section({}, "run") == {}
    assert config_section({"run": {"duration": 1}}, "run") == {"duration": 1}
