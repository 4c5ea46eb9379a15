from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from tabassert.helpers import TEST_FILE_PATTERN


class Format(str, Enum):
    """How expected/actual values are rendered in a "Not equal" failure.

    A member passed among an assertion's message args selects the format for
    that call only.
    """

    DEFAULT = "default"
    REPR = "repr"
    PRETTY = "pretty"


class AssertConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    format: Format = Format.DEFAULT
    padding: int = 5
    min_width: int = 0
    trace_pattern: str = TEST_FILE_PATTERN
    pretty_width: int = 80
    show_diff: bool = True

    @field_validator("padding", "min_width")
    @classmethod
    def must_not_be_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("must be >= 0")
        return v

    @field_validator("pretty_width")
    @classmethod
    def pretty_width_minimum(cls, v: int) -> int:
        if v < 20:
            raise ValueError("pretty_width must be >= 20")
        return v

    @field_validator("trace_pattern")
    @classmethod
    def trace_pattern_must_compile(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid trace_pattern {v!r}: {e}") from e
        return v


_active = AssertConfig()


def get_config() -> AssertConfig:
    return _active


def set_config(config: AssertConfig) -> AssertConfig:
    """Install ``config`` process-wide and return the previously active one."""
    global _active
    previous = _active
    _active = config
    return previous


def configure(**overrides: Any) -> AssertConfig:
    """Validate ``overrides`` on top of the active config and install the result."""
    config = AssertConfig(**{**_active.model_dump(), **overrides})
    set_config(config)
    return config


def load_config(path: Path) -> AssertConfig:
    """Load and validate a tabassert config from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return AssertConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    return AssertConfig(**raw)
