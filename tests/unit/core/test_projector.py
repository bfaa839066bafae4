from datetime import datetime

from json2sheet.core.classify import PresentationType
from json2sheet.core.projector import TableMode, project, schema_of
from json2sheet.core.styles import (
    EVEN_ROW_FILL,
    GREEN,
    HEADER_STYLE,
    ODD_ROW_FILL,
    PLAIN_HEADER_STYLE,
    CellPosition,
    style_for,
)
from json2sheet.core.values import parse_json_text


def _project(text, formatting_enabled=True):
    return project(parse_json_text(text), formatting_enabled=formatting_enabled)


# ---------------------------------------------------------------------
# Tabular mode
# ---------------------------------------------------------------------

def test_tabular_scenario():
    grid = _project('[{"name":"Alice","age":30},{"name":"Bob","age":25}]')
    assert grid.mode is TableMode.TABULAR
    assert grid.rows() == [["name", "age"], ["Alice", 30], ["Bob", 25]]
    assert (grid.n_rows, grid.n_columns) == (3, 2)
    assert grid.at(1, 1).style == HEADER_STYLE
    assert grid.at(2, 2).style.number_format == "#,##0"
    assert grid.at(2, 1).style.horizontal_align == "left"


def test_schema_comes_from_first_element_only():
    """later extra keys dropped, missing keys blank"""
    grid = _project('[{"a":1,"b":2},{"b":3,"c":4},{}]')
    assert grid.rows() == [["a", "b"], [1, 2], ["", 3], ["", ""]]
    assert grid.n_columns == 2


def test_absent_value_gets_base_style_only():
    grid = _project('[{"a":1,"b":2},{"b":3}]')
    missing = grid.at(3, 1)
    assert missing.value == ""
    assert missing.style == style_for(PresentationType.EMPTY, None, CellPosition(False, 1))


def test_null_renders_empty_not_text():
    grid = _project('[{"a":null}]')
    assert grid.at(2, 1).value == ""


def test_non_object_element_in_tabular_is_blank_row():
    grid = _project('[{"a":1}, 5, "x"]')
    assert grid.rows() == [["a"], [1], [""], [""]]
    assert grid.at(3, 1).style.fill_color == ODD_ROW_FILL


def test_tabular_zebra_and_types():
    grid = _project('[{"v":1.5,"ok":true},{"v":2,"ok":false}]')
    assert grid.at(2, 1).style.fill_color == EVEN_ROW_FILL
    assert grid.at(3, 1).style.fill_color == ODD_ROW_FILL
    assert grid.at(2, 1).style.number_format == "#,##0.00"
    assert grid.at(3, 1).style.number_format == "#,##0"
    assert grid.at(2, 2).style.font_color == GREEN and grid.at(2, 2).style.bold
    assert grid.at(3, 2).style.bold is False


def test_nested_array_property_is_compact_text():
    grid = _project('[{"tags":[1,2,3]}]')
    cell = grid.at(2, 1)
    assert cell.value == "[1,2,3]"
    assert cell.style.italic


def test_date_property():
    grid = _project('[{"when":"2024-01-15T10:30:00"}]')
    cell = grid.at(2, 1)
    assert cell.value == datetime(2024, 1, 15, 10, 30)
    assert cell.style.number_format == "mm/dd/yyyy"
    assert cell.style.horizontal_align == "center"


def test_schema_of():
    assert schema_of(parse_json_text('[{"x":1,"y":2}]').value) == ["x", "y"]
    assert schema_of(parse_json_text("[1]").value) == []
    assert schema_of(()) == []


# ---------------------------------------------------------------------
# List mode
# ---------------------------------------------------------------------

def test_list_mode():
    grid = _project('[1, "x", null, [1,2]]')
    assert grid.mode is TableMode.LIST
    assert grid.rows() == [["Value"], [1], ["x"], [""], ["[1,2]"]]


def test_list_mode_when_first_element_is_not_object():
    grid = _project('[1, {"a": 1}]')
    assert grid.mode is TableMode.LIST
    assert grid.at(3, 1).value == '{"a":1}'


# ---------------------------------------------------------------------
# Property/value mode
# ---------------------------------------------------------------------

def test_object_scenario():
    grid = _project('{"a":1,"active":true}')
    assert grid.mode is TableMode.PROPERTIES
    assert grid.rows() == [["Property", "Value"], ["a", 1], ["active", True]]
    active = grid.at(3, 2).style
    assert active.font_color == GREEN and active.bold


def test_empty_object_is_header_only():
    grid = _project("{}")
    assert grid.rows() == [["Property", "Value"]]


def test_property_names_are_plain_strings():
    grid = _project('{"a@b.co": "x@y.z"}')
    name, value = grid.at(2, 1), grid.at(2, 2)
    assert name.style.font_color is None and name.style.horizontal_align == "left"
    assert value.style.underline == "single"


# ---------------------------------------------------------------------
# Empty / scalar roots
# ---------------------------------------------------------------------

def test_empty_array_has_no_rows():
    grid = _project("[]")
    assert grid.mode is TableMode.EMPTY
    assert grid.cells == [] and grid.n_rows == 0 and grid.rows() == []


def test_scalar_root_single_unstyled_cell():
    for text, expected in [("42", "42"), ('"hi"', "hi"), ("null", ""), ("true", "true"), ("1.25", "1.25")]:
        grid = _project(text)
        assert grid.mode is TableMode.SCALAR
        assert grid.rows() == [[expected]]
        assert grid.at(1, 1).style is None


# ---------------------------------------------------------------------
# Formatting switch / purity
# ---------------------------------------------------------------------

def test_unformatted_headers_bold_and_data_unstyled():
    grid = _project('[{"a":1,"b":true}]', formatting_enabled=False)
    assert grid.at(1, 1).style == PLAIN_HEADER_STYLE
    assert grid.at(2, 1).style is None and grid.at(2, 2).style is None
    assert grid.at(2, 1).value == 1


def test_projection_is_deterministic():
    text = '[{"a":1,"b":"x@y.z","c":[1]},{"a":2.5}]'
    assert _project(text) == _project(text)
