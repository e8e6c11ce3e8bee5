import os
import sys
import tomllib

from importlib.metadata import version
from pathlib import Path

from cleo.application import Application
from pydantic import ValidationError

from reginald.commands.level import LevelFormatCommand
from reginald.commands.level import LevelParseCommand
from reginald.logs.conf import LogsConf
from reginald.logs.conf import configure_logging


def main() -> int:
    try:
        conf = LogsConf.load_from_dir(Path.cwd())
    except (ValidationError, tomllib.TOMLDecodeError, ValueError) as err:
        print(f"Invalid logs configuration:\n{err}", file=sys.stderr)
        return os.EX_CONFIG
    configure_logging(conf)

    app = Application(name="reginald", version=str(version("reginald-logs")))
    app.add(LevelFormatCommand())
    app.add(LevelParseCommand())
    exit_code = app.run()
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
