import logging
from typing import Any

import click

_logger = logging.getLogger(__name__)


class LoggerParser(click.ParamType):
    """Convert a -v count or a textual level into the configured mocklite logger."""

    name = "Logger"

    def __init__(self, logger_name: str = "mocklite"):
        self.logger_name = logger_name

    def convert(
        self,
        value: Any,
        parameter: click.Parameter | None,
        ctx: click.Context | None,
    ) -> logging.Logger:
        try:
            level = self._coerce_level(value)
        except ValueError as exc:
            self.fail(str(exc), param=parameter, ctx=ctx)

        _logger.debug("Log level resolved to %s", logging.getLevelName(level))
        logger = logging.getLogger(self.logger_name)
        logger.setLevel(level)
        return logger

    def _coerce_level(self, value: Any) -> int:
        if isinstance(value, logging.Logger):
            return value.level

        if isinstance(value, bool):
            raise ValueError(f"unsupported log level value {value!r}")

        if isinstance(value, str):
            stripped = value.strip()
            if not stripped:
                raise ValueError("log level cannot be empty")
            if stripped.isdigit():
                number = int(stripped)
                if number <= 4:
                    return self._level_from_count(number)
                return number
            level = logging.getLevelName(stripped.upper())
            if isinstance(level, int):
                return level
            raise ValueError(f"unknown log level '{value}'")

        if isinstance(value, (int, float)):
            return self._level_from_count(int(value))

        raise ValueError(f"unsupported log level value {value!r}")

    @staticmethod
    def _level_from_count(count: int) -> int:
        if count <= 0:
            return logging.WARNING
        if count == 1:
            return logging.INFO
        return logging.DEBUG
