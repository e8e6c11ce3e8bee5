import json
import re

from typing import Any
from typing import Final

from reginald.logs.errors import FormatError
from reginald.logs.errors import ParseError
from reginald.logs.errors import UnknownNameError


_SIGN_RE: Final = re.compile(r"[+-]")
_OFFSET_RE: Final = re.compile(r"[+-][0-9]+")

MIN_LEVEL: Final[int] = -(2**63)
MAX_LEVEL: Final[int] = 2**63 - 1
_MAX_OFFSET_DIGITS: Final[int] = len(str(MAX_LEVEL))


class Level(int):
    """
    The importance or severity of a log event. The higher the level, the more
    important or severe the event.

    Five named anchors split the integer line into bands. A level that is not
    an anchor is shown as the name of the closest anchor below it followed by
    a signed offset, so ``WARN - 1`` reads as ``INFO+3`` and anything under
    TRACE reads as ``TRACE-n``.

    Arithmetic with plain integers keeps the result a Level. Levels are
    limited to the signed 64-bit range; anything outside raises OverflowError.
    """

    __slots__ = ()

    def __new__(cls, value: Any = 0) -> "Level":
        level = super().__new__(cls, value)
        if not MIN_LEVEL <= level <= MAX_LEVEL:
            raise OverflowError("logs: level out of the signed 64-bit range")
        return level

    def __str__(self) -> str:
        return encode(self)

    def __repr__(self) -> str:
        return f"Level({encode(self)})"

    def __add__(self, other: Any) -> Any:
        return _wrap(int.__add__(self, other))

    def __radd__(self, other: Any) -> Any:
        return _wrap(int.__radd__(self, other))

    def __sub__(self, other: Any) -> Any:
        return _wrap(int.__sub__(self, other))

    def __rsub__(self, other: Any) -> Any:
        return _wrap(int.__rsub__(self, other))

    def __neg__(self) -> "Level":
        return Level(-int(self))

    @classmethod
    def parse(cls, text: str) -> "Level":
        return parse(text)

    @classmethod
    def from_value(cls, value: Any) -> "Level":
        """
        Builds a level from a config or record value: a Level, a plain integer
        or any string accepted by ``parse``.
        """
        if isinstance(value, Level):
            return value
        if isinstance(value, bool):
            raise ValueError(f"logs: level must be a string or an integer, not {value!r}")
        if isinstance(value, int):
            try:
                return Level(value)
            except OverflowError as err:
                raise ValueError(str(err)) from err
        if isinstance(value, str):
            return parse(value)
        raise ValueError(
            f"logs: level must be a string or an integer, not {type(value).__name__}"
        )

    # -- json --

    def marshal_json(self) -> bytes:
        return json.dumps(encode(self)).encode("ascii")

    @classmethod
    def unmarshal_json(cls, data: bytes | bytearray | str) -> "Level":
        """
        Accepts any string produced by ``marshal_json``, ignoring case. Numeric
        offsets that would print differently are accepted too: ``"Error-8"``
        decodes to INFO.
        """
        raw = data if isinstance(data, str) else bytes(data).decode("utf-8", errors="replace")
        try:
            value = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as err:
            raise FormatError(raw, str(err)) from err

        if not isinstance(value, str):
            raise FormatError(raw, f"expected a json string, got {type(value).__name__}")

        return parse(value)

    # -- text --

    def append_text(self, buf: bytearray) -> bytearray:
        buf.extend(encode(self).encode("ascii"))
        return buf

    def marshal_text(self) -> bytes:
        return bytes(self.append_text(bytearray()))

    @classmethod
    def unmarshal_text(cls, data: bytes | bytearray | str) -> "Level":
        if not isinstance(data, str):
            data = bytes(data).decode("utf-8", errors="replace")
        return parse(data)

    # -- stdlib logging --

    def to_logging_level(self) -> int:
        """
        Maps the level onto the ``logging`` module scale: INFO is 20 and every
        step is worth 2.5 points, so DEBUG is 10, WARN is 30 and ERROR is 40.
        TRACE and below stay above NOTSET.
        """
        return max(1, 20 + (5 * int(self)) // 2)


def _wrap(result: Any) -> Any:
    if result is NotImplemented or isinstance(result, Level) or not isinstance(result, int):
        return result
    return Level(result)


TRACE: Final[Level] = Level(-8)
DEBUG: Final[Level] = Level(-4)
INFO: Final[Level] = Level(0)
WARN: Final[Level] = Level(4)
ERROR: Final[Level] = Level(8)

ANCHORS: Final[tuple[tuple[str, Level], ...]] = (
    ("TRACE", TRACE),
    ("DEBUG", DEBUG),
    ("INFO", INFO),
    ("WARN", WARN),
    ("ERROR", ERROR),
)

_ANCHORS_BY_NAME: Final[dict[str, Level]] = dict(ANCHORS)


def _band(value: int) -> tuple[str, Level]:
    for name, anchor in reversed(ANCHORS[1:]):
        if value >= anchor:
            return name, anchor
    # everything under DEBUG, however low, belongs to TRACE
    return ANCHORS[0]


def encode(level: int) -> str:
    """Canonical name of a level. Total over the signed 64-bit range of Level."""
    name, anchor = _band(level)
    offset = int(level) - int(anchor)
    if offset == 0:
        return name
    return f"{name}{offset:+d}"


def parse(text: str) -> Level:
    name = text
    offset_text = ""
    offset = 0

    if (sign := _SIGN_RE.search(text)) is not None:
        name = text[: sign.start()]
        offset_text = text[sign.start() :]
        if _OFFSET_RE.fullmatch(offset_text) is None:
            raise ParseError(text, offset_text)
        digits = offset_text[1:].lstrip("0") or "0"
        if len(digits) > _MAX_OFFSET_DIGITS:
            raise ParseError(text, offset_text, "value out of range")
        offset = int(digits) if offset_text[0] == "+" else -int(digits)

    anchor = _ANCHORS_BY_NAME.get(name.upper())
    if anchor is None:
        raise UnknownNameError(name)

    value = int(anchor) + offset
    if not MIN_LEVEL <= value <= MAX_LEVEL:
        raise ParseError(text, offset_text, "value out of range")
    return Level(value)
