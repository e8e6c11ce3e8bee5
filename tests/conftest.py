import logging

import pytest

from _pytest.monkeypatch import MonkeyPatch

from reginald.logs.conf import DISABLED_ENV
from reginald.logs.conf import LEVEL_ENV


@pytest.fixture(autouse=True)
def clean_logs_env(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.delenv(LEVEL_ENV, raising=False)
    monkeypatch.delenv(DISABLED_ENV, raising=False)


@pytest.fixture
def reginald_logger():
    package_logger = logging.getLogger("reginald")
    saved_level = package_logger.level
    yield package_logger
    package_logger.setLevel(saved_level)
