class LevelError(ValueError):
    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.text = text


class UnknownNameError(LevelError):
    def __init__(self, name: str) -> None:
        super().__init__(f"logs: level has unknown name: {name}", name)


class ParseError(LevelError):
    def __init__(self, text: str, offset: str, reason: str = "invalid syntax") -> None:
        super().__init__(f"logs: level string {text!r}: offset {offset!r}: {reason}", text)
        self.offset = offset
        self.reason = reason


class FormatError(LevelError):
    """The JSON envelope of a level is not a quoted string."""

    def __init__(self, data: str, reason: str) -> None:
        super().__init__(f"logs: level json {data!r}: {reason}", data)
