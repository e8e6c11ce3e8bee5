from abc import abstractmethod
from typing import Protocol

from reginald.logs.level import INFO
from reginald.logs.level import Level


class Listener(Protocol):
    @abstractmethod
    def message(self, message: str, level: Level = INFO) -> None:
        pass

    def __call__(self, message: str, level: Level = INFO) -> None:
        self.message(message, level)


class NullListener(Listener):
    def message(self, message: str, level: Level = INFO) -> None:
        pass


NULL_LISTENER = NullListener()
