from cleo.io.io import IO

from reginald.logs.level import INFO
from reginald.logs.level import Level
from reginald.protocols.listener import Listener
from reginald.protocols.verbosity import verbosity_for


class CommandListener(Listener):
    def __init__(self, io: IO) -> None:
        super().__init__()
        self.io = io

    def message(self, message: str, level: Level = INFO) -> None:
        self.io.write_line(message, verbosity_for(level))
