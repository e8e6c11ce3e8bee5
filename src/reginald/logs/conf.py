import logging
import os
import tomllib

from pathlib import Path
from typing import Any
from typing import Final

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_serializer
from pydantic import field_validator

from reginald.logs.level import INFO
from reginald.logs.level import TRACE
from reginald.logs.level import Level


CONFIG_FILE_NAME: Final[str] = "reginald.toml"
LEVEL_ENV: Final[str] = "REGINALD_LOG_LEVEL"
DISABLED_ENV: Final[str] = "REGINALD_LOGS_DISABLED"
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


class LogsConf(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    level: Level = Field(default=INFO)
    enabled: bool = Field(default=True)

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> Level:
        return Level.from_value(v)

    @field_serializer("level")
    def serialize_level(self, level: Level) -> str:
        return str(level)

    @staticmethod
    def load_from_dir(from_dir: Path) -> "LogsConf":
        values: dict[str, Any] = {}

        config_file = from_dir / CONFIG_FILE_NAME
        if config_file.exists():
            config_dict = tomllib.loads(config_file.read_text(encoding="utf8"))
            if "logs" in config_dict:
                if not isinstance(config_dict["logs"], dict):
                    raise ValueError(f"logs section in {config_file} must be a table")
                logger.debug(f"Reading logs section from {config_file}")
                values.update(config_dict["logs"])
            else:
                logger.debug(f"No logs section in {config_file}, using defaults")
        else:
            logger.debug(f"{CONFIG_FILE_NAME} not found in {from_dir}, using defaults")

        if (env_level := os.getenv(LEVEL_ENV)) is not None:
            logger.debug(f"Log level overridden by {LEVEL_ENV}={env_level}")
            values["level"] = env_level
        if os.getenv(DISABLED_ENV) is not None:
            values["enabled"] = False

        return LogsConf(**values)


def configure_logging(conf: LogsConf) -> None:
    """
    Applies the configuration to the ``reginald`` logger tree. A disabled
    configuration silences the tree instead of touching the root logger.
    """
    logging.addLevelName(TRACE.to_logging_level(), "TRACE")

    package_logger = logging.getLogger("reginald")
    if not conf.enabled:
        package_logger.setLevel(logging.CRITICAL + 1)
        return

    package_logger.setLevel(conf.level.to_logging_level())
    logging.basicConfig(format=LOG_FORMAT)
    logger.debug(f"Logging configured at {conf.level}")
