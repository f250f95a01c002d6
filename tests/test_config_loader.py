from pathlib import Path

import pytest
from pydantic import ValidationError

from treeweave.config import TreeMapConfig, deep_update, load_config


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(tmp_path / "absent.yaml")
    assert cfg == TreeMapConfig()
    assert cfg.colour.mutation == 0.2
    assert cfg.colour.colour_level == 1


def test_overrides_win_over_file(tmp_path):
    p = tmp_path / "treemap.yaml"
    p.write_text("colour: {mutation: 0.4, seed: 7}\nviz: {dpi: 72}\n")
    cfg = load_config(p, overrides={"colour": {"mutation": 0.9}})
    assert cfg.colour.mutation == 0.9
    assert cfg.colour.seed == 7
    assert cfg.viz.dpi == 72


def test_shipped_config_is_valid():
    cfg = load_config(Path(__file__).resolve().parents[1] / "configs" / "treemap.yaml")
    assert cfg.logging.level == "none"


@pytest.mark.parametrize(
    "override",
    [
        {"colour": {"mutation": 1.5}},
        {"colour": {"colour_level": -1}},
        {"colour": {"unknown": 1}},
        {"logging": {"level": "loud"}},
        {"extra": {}},
    ],
)
def test_invalid_values_rejected(tmp_path, override):
    with pytest.raises(ValidationError):
        load_config(tmp_path / "absent.yaml", overrides=override)


def test_top_level_must_be_mapping(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("- 1\n- 2\n")
    with pytest.raises(TypeError):
        load_config(p)


def test_deep_update_leaves_base_untouched():
    base = {"a": {"b": 1, "c": 2}}
    out = deep_update(base, {"a": {"b": 5}, "d": 1})
    assert out == {"a": {"b": 5, "c": 2}, "d": 1}
    assert base == {"a": {"b": 1, "c": 2}}
