"""Tests for the elastic tabstop table."""

import pytest

from tabassert.tablewriter import Table


def test_write_row_aligns_columns():
    table = Table()
    table.write_row("Test:", "TestFoo")
    table.write_row("Error:", "Not equal")

    assert str(table) == (
        "\n"
        "Test:      TestFoo       \n"
        "Error:     Not equal     "
    )


def test_trailing_text_does_not_widen_column():
    table = Table()
    table.writef("\nExpect:\t%s\t(%s)", 1, "int")
    table.writef("\nActual:\t%s\t(%s)", 22, "int")

    assert table.render() == (
        "\n"
        "Expect:     1      (int)\n"
        "Actual:     22     (int)"
    )


def test_line_without_tabs_ends_column_block():
    table = Table()
    table.writef("a\tb\nlonger line\nccc\td")

    assert table.render() == "a     b\nlonger line\nccc     d"


def test_nested_blocks_keep_outer_column():
    table = Table()
    table.write_row("Test:", "name")
    table.writef("\nTrace:\t%s", "\n\t".join(["x_test.py:1", "y_test.py:2"]))
    table.write_row("Error:", "Not equal")

    lines = table.render().split("\n")

    assert lines == [
        "",
        "Test:" + " " * 6 + "name" + " " * 5,
        "Trace:" + " " * 5 + "x_test.py:1",
        " " * 11 + "y_test.py:2",
        "Error:" + " " * 5 + "Not equal" + " " * 5,
    ]


def test_min_width_applies_when_wider_than_cells():
    table = Table(padding=1, min_width=10)
    table.write_row("a", "b")

    assert table.render() == "\n" + "a" + " " * 9 + "b" + " " * 9


def test_writef_without_args_keeps_percent_signs():
    table = Table()
    table.writef("100%\tdone")

    assert table.render() == "100%     done"


def test_render_is_repeatable_and_writes_append():
    table = Table()
    table.write_row("a", "b")
    first = table.render()
    assert table.render() == first

    table.write_row("longer", "c")
    assert table.render() == (
        "\n"
        "a" + " " * 10 + "b" + " " * 5 + "\n"
        "longer" + " " * 5 + "c" + " " * 5
    )


def test_output_never_contains_tabs():
    table = Table()
    table.writef("\n\tindented\tcell\t\nx\ty")

    assert "\t" not in table.render()


def test_empty_table_renders_empty_string():
    assert Table().render() == ""


@pytest.mark.parametrize("kwargs", [{"padding": -1}, {"min_width": -3}])
def test_negative_sizes_rejected(kwargs):
    with pytest.raises(ValueError):
        Table(**kwargs)
