"""Tests for config loading and validation."""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from tabassert.config import (
    AssertConfig,
    Format,
    configure,
    get_config,
    load_config,
    set_config,
)
from tabassert.helpers import TEST_FILE_PATTERN


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "tabassert.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_defaults():
    cfg = AssertConfig()
    assert cfg.format is Format.DEFAULT
    assert cfg.padding == 5
    assert cfg.min_width == 0
    assert cfg.trace_pattern == TEST_FILE_PATTERN
    assert cfg.pretty_width == 80
    assert cfg.show_diff is True


def test_load_full_config(tmp_yaml):
    path = tmp_yaml("""\
        format: pretty
        padding: 2
        min_width: 8
        trace_pattern: '_spec\\.py$'
        pretty_width: 120
        show_diff: false
    """)
    cfg = load_config(path)
    assert cfg.format is Format.PRETTY
    assert cfg.padding == 2
    assert cfg.min_width == 8
    assert cfg.trace_pattern == r"_spec\.py$"
    assert cfg.pretty_width == 120
    assert cfg.show_diff is False


def test_load_empty_file_gives_defaults(tmp_yaml):
    assert load_config(tmp_yaml("")) == AssertConfig()


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_load_rejects_non_mapping(tmp_yaml):
    with pytest.raises(ValueError, match="mapping"):
        load_config(tmp_yaml("- just\n- a list\n"))


def test_unknown_key_rejected(tmp_yaml):
    with pytest.raises(ValidationError):
        load_config(tmp_yaml("colour: red\n"))


def test_unknown_format_rejected():
    with pytest.raises(ValidationError):
        AssertConfig(format="fancy")


@pytest.mark.parametrize("field", ["padding", "min_width"])
def test_negative_sizes_rejected(field):
    with pytest.raises(ValidationError, match="must be >= 0"):
        AssertConfig(**{field: -1})


def test_pretty_width_minimum():
    with pytest.raises(ValidationError):
        AssertConfig(pretty_width=5)


def test_invalid_trace_pattern_rejected():
    with pytest.raises(ValidationError, match="invalid trace_pattern"):
        AssertConfig(trace_pattern="(unclosed")


def test_configure_merges_overrides():
    cfg = configure(padding=1)

    assert get_config() is cfg
    assert cfg.padding == 1
    assert cfg.format is Format.DEFAULT


def test_configure_validates():
    before = get_config()

    with pytest.raises(ValidationError):
        configure(padding=-2)

    assert get_config() is before


def test_set_config_returns_previous():
    original = get_config()
    replacement = AssertConfig(show_diff=False)

    assert set_config(replacement) is original
    assert get_config() is replacement
