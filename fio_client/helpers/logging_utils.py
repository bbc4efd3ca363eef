import json
import logging
import sys
from datetime import datetime, tzinfo
from logging.config import dictConfig
from pathlib import Path

PACKAGE_LOGGER = "fio_client"


def init_logging(
    folder: Path,
    file_name: str,
    config: Path,
    tz: tzinfo | None = None,
    level: str | None = None,
) -> None:
    """Loads a JSON dictConfig and points its ``FileHandler`` into ``folder``.

    ``level`` overrides the level of the package logger from the config.
    """
    folder.mkdir(parents=True, exist_ok=True)
    with open(config, encoding="utf-8") as file:
        config_data = json.load(file)

    if file_handler := config_data.get("handlers", {}).get("FileHandler"):
        file_handler["filename"] = str(folder / file_name)
    if level:
        loggers = config_data.setdefault("loggers", {})
        loggers.setdefault(PACKAGE_LOGGER, {})["level"] = level.upper()
    dictConfig(config_data)

    if tz and sys.platform.startswith("win"):
        logging.Formatter.converter = lambda *args: datetime.now(
            tz
        ).timetuple()
