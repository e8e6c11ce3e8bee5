import os

from typing import ClassVar

from cleo.commands.command import Command
from cleo.helpers import argument
from cleo.helpers import option

from reginald.impl.listener import CommandListener
from reginald.logs.errors import LevelError
from reginald.logs.level import DEBUG
from reginald.logs.level import Level


class LevelFormatCommand(Command):
    name = "level format"
    description = "Print the canonical name of a numeric log level."

    arguments: ClassVar = [
        argument(
            "value",
            description="Numeric level. Put negative values after --, e.g. -- -10.",
        ),
    ]
    options: ClassVar = [
        option(
            long_name="json",
            description="Print the name as a JSON string.",
            flag=True,
        ),
    ]

    def handle(self) -> int:
        raw_value = self.argument("value")
        try:
            level = Level(int(raw_value))
        except ValueError:
            self.line_error(f"<error>Level value must be an integer, got '{raw_value}'.</error>")
            return os.EX_USAGE
        except OverflowError as err:
            self.line_error(f"<error>{err}</error>")
            return os.EX_USAGE

        out = CommandListener(self.io)
        out(f"Formatting level {int(level)}", DEBUG)
        if self.option("json"):
            out(level.marshal_json().decode("ascii"))
        else:
            out(str(level))
        return os.EX_OK


class LevelParseCommand(Command):
    name = "level parse"
    description = "Print the numeric value of a log level name such as warn+2."

    arguments: ClassVar = [
        argument(
            "text",
            description="Level name with an optional signed offset.",
        ),
    ]
    options: ClassVar = [
        option(
            long_name="json",
            description="Read the text as a JSON string literal.",
            flag=True,
        ),
        option(
            long_name="canonical",
            short_name="c",
            description="Also print the canonical name of the level.",
            flag=True,
        ),
    ]

    def handle(self) -> int:
        text = self.argument("text")
        out = CommandListener(self.io)

        try:
            if self.option("json"):
                level = Level.unmarshal_json(text)
            else:
                level = Level.unmarshal_text(text)
        except LevelError as err:
            self.line_error(f"<error>{err}</error>")
            return os.EX_DATAERR

        out(f"Parsed {text!r} as {level!r}", DEBUG)
        out(str(int(level)))
        if self.option("canonical"):
            out(str(level))
        return os.EX_OK
