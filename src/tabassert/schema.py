"""Generate JSON Schema and docs for the tabassert YAML config."""

from __future__ import annotations

import json
from pathlib import Path

from tabassert.config import AssertConfig


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def generate_json_schema() -> dict:
    schema = AssertConfig.model_json_schema()
    schema["title"] = "tabassert config"
    return schema


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")


def _describe_type(prop: dict, defs: dict) -> str:
    if "allOf" in prop and len(prop["allOf"]) == 1:
        prop = prop["allOf"][0]
    if "$ref" in prop:
        ref = defs.get(prop["$ref"].removeprefix("#/$defs/"), {})
        if "enum" in ref:
            return "one of: " + ", ".join(str(v) for v in ref["enum"])
        return ref.get("type", "object")
    return prop.get("type", "any")


def generate_schema_doc() -> str:
    schema = generate_json_schema()
    defs = schema.get("$defs", {})

    lines: list[str] = []
    lines.append("# tabassert YAML Schema")
    lines.append("")
    lines.append("This doc is generated from the Pydantic models.")
    lines.append("")
    lines.append("## Keys")
    for name, prop in schema.get("properties", {}).items():
        default = prop.get("default")
        lines.append(f"- `{name}`: {_describe_type(prop, defs)} (default: `{default}`)")

    lines.append("")
    return "\n".join(lines)


def write_schema_doc(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(generate_schema_doc())
