from datetime import datetime

import pytest

from json2sheet.core.classify import PresentationType, classify, looks_like_email
from json2sheet.core.values import JsonValue, parse_json_text


@pytest.mark.parametrize(
    "value, expected",
    [
        (JsonValue.integer(30), PresentationType.INTEGER),
        (JsonValue.float_(2.5), PresentationType.FLOAT),
        (JsonValue.date(datetime(2024, 1, 15)), PresentationType.DATE_VALUE),
        (JsonValue.boolean(True), PresentationType.BOOLEAN),
        (JsonValue.boolean(False), PresentationType.BOOLEAN),
        (JsonValue.string("hello"), PresentationType.PLAIN_STRING),
        (JsonValue.string("a@b.co"), PresentationType.EMAIL_STRING),
        (parse_json_text("[1, 2, 3]"), PresentationType.COMPOSITE),
        (parse_json_text('{"a": 1}'), PresentationType.COMPOSITE),
        (JsonValue.null(), PresentationType.EMPTY),
        (None, PresentationType.EMPTY),
    ],
)
def test_classify(value, expected):
    assert classify(value) is expected


@pytest.mark.parametrize(
    "text, is_email",
    [
        ("a@b.co", True),
        ("first.last@example.org", True),
        ("@.", True),            # heuristic, not a grammar
        ("notanemail", False),
        ("@", False),            # no dot
        ("a.b", False),          # no at-sign
        ("", False),
    ],
)
def test_email_heuristic(text, is_email):
    assert looks_like_email(text) is is_email
    expected = PresentationType.EMAIL_STRING if is_email else PresentationType.PLAIN_STRING
    assert classify(JsonValue.string(text)) is expected


def test_classify_is_pure():
    v = JsonValue.string("x@y.z")
    assert classify(v) is classify(v)
