import json

import pytest

from reginald.logs.errors import FormatError
from reginald.logs.errors import ParseError
from reginald.logs.errors import UnknownNameError
from reginald.logs.level import DEBUG
from reginald.logs.level import ERROR
from reginald.logs.level import INFO
from reginald.logs.level import TRACE
from reginald.logs.level import WARN
from reginald.logs.level import Level


def test_marshal_json() -> None:
    level = WARN - 3

    data = level.marshal_json()
    assert data == b'"INFO+1"'
    assert Level.unmarshal_json(data) == level


@pytest.mark.parametrize(
    "level",
    [TRACE - 5, TRACE, TRACE + 1, DEBUG, DEBUG + 3, INFO, INFO + 2, WARN, WARN + 1, ERROR, ERROR + 40],
)
def test_json_round_trip(level: Level) -> None:
    data = level.marshal_json()
    assert json.loads(data) == str(level)
    assert Level.unmarshal_json(data) == level


def test_unmarshal_json_is_permissive() -> None:
    assert Level.unmarshal_json('"Error-8"') == INFO
    assert Level.unmarshal_json(b'"warn"') == WARN
    assert Level.unmarshal_json(bytearray(b'"debug+1"')) == DEBUG + 1
    assert Level.unmarshal_json(b'"\\u0049NFO"') == INFO


@pytest.mark.parametrize(
    "data",
    [b"INFO", b'"INFO', b"", b"4", b"null", b'["INFO"]', b"\x80abc", b"[" * 100000],
)
def test_unmarshal_json_bad_envelope(data: bytes) -> None:
    with pytest.raises(FormatError):
        Level.unmarshal_json(data)


def test_unmarshal_json_bad_content() -> None:
    with pytest.raises(UnknownNameError):
        Level.unmarshal_json(b'"dbg"')
    with pytest.raises(ParseError):
        Level.unmarshal_json(b'"INFO+"')


def test_marshal_text() -> None:
    level = WARN - 3

    data = level.marshal_text()
    assert data == b"INFO+1"
    assert isinstance(data, bytes)
    assert Level.unmarshal_text(data) == level


def test_unmarshal_text() -> None:
    assert Level.unmarshal_text(b"error-8") == INFO
    assert Level.unmarshal_text("TRACE-2") == TRACE - 2
    assert Level.unmarshal_text(bytearray(b"Warn+1")) == WARN + 1

    # text is never unquoted
    with pytest.raises(UnknownNameError):
        Level.unmarshal_text(b'"INFO"')
    with pytest.raises(ParseError):
        Level.unmarshal_text(b"ERROR+23x")


def test_append_text() -> None:
    buf = bytearray(4)
    level = WARN - 3

    data = level.append_text(buf)
    assert data == b"\x00\x00\x00\x00INFO+1"
    assert data is buf


def test_append_text_keeps_existing_content() -> None:
    buf = bytearray(b"level=")

    ERROR.append_text(buf)
    buf.extend(b" next=")
    (TRACE - 2).append_text(buf)

    assert buf == b"level=ERROR next=TRACE-2"
