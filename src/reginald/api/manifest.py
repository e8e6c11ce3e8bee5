from enum import Enum

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class ValueType(str, Enum):
    BOOL = "bool"
    INT = "int"
    STRING = "string"


class _Record(BaseModel):
    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True, serialize_by_alias=True)


class KeyValue(_Record):
    key: str
    value: bool | int | str
    type: ValueType


class Flag(_Record):
    """
    A command-line flag declared in the manifest. A flag always belongs to a
    ConfigEntry: when the user passes the flag, its value becomes the value of
    that entry.
    """

    name: str = Field(
        default="",
        description="Long name, written as --name. Falls back to the entry key when empty.",
    )
    shorthand: str = Field(default="", description="One-letter name, written as -n.")
    description: str = Field(default="")


class ConfigEntry(KeyValue):
    """
    A config value supported by a plugin or one of its commands. The host adds
    it to the config file, creates a flag for it and checks an environment
    variable for it, unless the fields below say otherwise.
    """

    flag: Flag | None = Field(default=None)
    env_override: str | None = Field(default=None, alias="env")
    flag_only: bool = Field(
        default=False,
        alias="flagOnly",
        description="Only the flag sets the value; the config file and environment are skipped.",
    )


class Command(_Record):
    """
    A utility command of a plugin, run by the user as a subcommand of the
    plugin domain. State changes belong in tasks, not here.
    """

    name: str
    usage: str = Field(default="", description="One-line usage without the plugin domain.")
    description: str = Field(default="")
    aliases: list[str] = Field(default_factory=list)
    config: list[ConfigEntry] = Field(default_factory=list)


class Task(_Record):
    task_type: str = Field(alias="type")
    description: str = Field(default="")
    config: list[KeyValue] = Field(default_factory=list)


class Manifest(_Record):
    name: str
    domain: str
    description: str = Field(default="")
    executable: str
    config: list[ConfigEntry] = Field(default_factory=list)
    commands: list[Command] = Field(default_factory=list)
    tasks: list[Task] = Field(default_factory=list)
