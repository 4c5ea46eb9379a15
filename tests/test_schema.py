import json

from tabassert.schema import (
    generate_json_schema,
    generate_schema_doc,
    write_json_schema,
    write_schema_doc,
)


def test_json_schema_lists_config_keys():
    schema = generate_json_schema()

    assert schema["title"] == "tabassert config"
    assert set(schema["properties"]) == {
        "format",
        "padding",
        "min_width",
        "trace_pattern",
        "pretty_width",
        "show_diff",
    }
    assert schema["additionalProperties"] is False


def test_schema_doc_describes_format_choices():
    doc = generate_schema_doc()

    assert doc.startswith("# tabassert YAML Schema")
    assert "`format`: one of: default, repr, pretty" in doc
    assert "`padding`: integer (default: `5`)" in doc


def test_write_schema_files(tmp_path):
    out = tmp_path / "nested" / "schema.json"
    doc = tmp_path / "docs" / "schema.md"

    write_json_schema(out)
    write_schema_doc(doc)

    assert json.loads(out.read_text())["title"] == "tabassert config"
    assert "show_diff" in doc.read_text()
