from __future__ import annotations

from pathlib import Path

import typer

from tabassert.config import Format

app = typer.Typer(name="tabassert", help="Compare values and print aligned failure tables")

_DEFAULT_CONFIG = """\
# tabassert configuration
# format: default | repr | pretty
format: default
# spaces added after the widest cell of each column
padding: 5
min_width: 0
# only stack frames from files whose name matches are listed under Trace:
trace_pattern: '^(test_.*|.*_test)\\.py$'
pretty_width: 80
show_diff: true
"""


def _load_document(label: str, path: Path):
    import yaml

    if not path.exists():
        typer.echo(f"Error: {label} file not found: {path}", err=True)
        raise typer.Exit(1)
    try:
        return yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        typer.echo(f"Error: cannot parse {label} file {path}: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def compare(
    expected: str = typer.Argument(help="Path to the expected YAML or JSON document"),
    actual: str = typer.Argument(help="Path to the actual YAML or JSON document"),
    fmt: Format | None = typer.Option(
        None, "--format", "-f", help="How values are printed on mismatch"
    ),
    config: str | None = typer.Option(None, help="Path to tabassert YAML config"),
    junit: str | None = typer.Option(None, help="Also write a JUnit XML report here"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    debug_file: str | None = typer.Option(None, help="Append debug output to this file"),
):
    """Compare two documents structurally; exit 1 and print a table on mismatch."""
    from tabassert.assertions import equal
    from tabassert.config import get_config, load_config, set_config
    from tabassert.reporting import JUnitReporter, RecordingReporter
    from tabassert.verbose import setup_logger

    logger = setup_logger(Path(debug_file) if debug_file else None, verbose=verbose)

    expected_path = Path(expected)
    actual_path = Path(actual)
    expected_doc = _load_document("expected", expected_path)
    actual_doc = _load_document("actual", actual_path)

    previous = get_config()
    if config is not None:
        try:
            set_config(load_config(Path(config)))
        except (OSError, ValueError) as e:
            typer.echo(f"Error: invalid config {config}: {e}", err=True)
            raise typer.Exit(1)

    reporter = RecordingReporter(name=f"{expected_path.name} == {actual_path.name}")
    logger.info(f"Comparing {expected_path} with {actual_path}")
    try:
        passed = equal(reporter, expected_doc, actual_doc, *([fmt] if fmt else []))
    finally:
        set_config(previous)
    logger.info(f"passed={passed}")

    if junit is not None:
        junit_reporter = JUnitReporter("tabassert compare")
        case = junit_reporter.case(reporter.name)
        for message in reporter.errors:
            case.error(message)
        junit_path = junit_reporter.write(Path(junit))
        typer.echo(f"JUnit report: {junit_path}")

    if not passed:
        for message in reporter.errors:
            typer.echo(message)
        raise typer.Exit(1)

    typer.echo("Documents are equal.")


@app.command()
def init(
    dir: str = typer.Option(".", "--dir", help="Directory to write tabassert.yaml in"),
):
    """Write a default tabassert.yaml config."""
    project_dir = Path(dir)
    project_dir.mkdir(parents=True, exist_ok=True)

    config_path = project_dir / "tabassert.yaml"
    if config_path.exists():
        typer.echo(f"tabassert.yaml already exists in {dir}, skipping.")
        return

    config_path.write_text(_DEFAULT_CONFIG)
    typer.echo(f"Wrote {config_path}")


@app.command()
def schema(
    dir: str = typer.Option(
        ".", "--dir", help="Project directory for default schema/doc outputs"
    ),
    out: str | None = typer.Option(
        None,
        help="Output path for JSON Schema (defaults to <dir>/schemas/tabassert.schema.json)",
    ),
    doc: str | None = typer.Option(
        None, help="Output path for schema docs (defaults to <dir>/docs/schema.md)"
    ),
):
    """Generate JSON Schema and docs for the config format."""
    from tabassert.schema import write_json_schema, write_schema_doc

    project_dir = Path(dir)
    out_path = (
        Path(out)
        if out is not None
        else project_dir / "schemas" / "tabassert.schema.json"
    )
    doc_path = Path(doc) if doc is not None else project_dir / "docs" / "schema.md"
    write_json_schema(out_path)
    write_schema_doc(doc_path)
    typer.echo(f"Wrote schema: {out_path}")
    typer.echo(f"Wrote docs: {doc_path}")
