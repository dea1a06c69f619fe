# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import re

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from frozendict import frozendict
from pydantic import DirectoryPath, Field, field_validator

from ..config.base_model import BaseConfigModel
from ..helpers.frozendict import FrozenDict
from .levels import LoggingLevel


class LoggingLevels(BaseConfigModel):
    file: LoggingLevel = Field(default=LoggingLevel.OFF, description="Log level for log file output")
    tty: LoggingLevel = Field(default=LoggingLevel.NOTSET, description="Log level for TTY output")
    root: LoggingLevel = Field(default=LoggingLevel.NOTSET, description="Log level for the root log handler")
    default: LoggingLevel = Field(default=LoggingLevel.INFO, description="Default log level for loggers not matched by 'custom'")

    custom: FrozenDict[re.Pattern[str], LoggingLevel] = Field(
        default_factory=frozendict,
        description="Per-logger levels, keyed by a case-insensitive regex matched against the logger name. The longest match wins.",
    )

    @field_validator("custom", mode="before")
    @classmethod
    def compile_custom_level_patterns(cls, value: Any) -> frozendict[re.Pattern[str], LoggingLevel]:
        if not isinstance(value, Mapping):
            msg = f"Custom logging levels must be a mapping, got {type(value)}"
            raise TypeError(msg)
        return frozendict({cls._compile(pattern): level for pattern, level in value.items()})

    @staticmethod
    def _compile(pattern: Any) -> re.Pattern[str]:
        match pattern:
            case re.Pattern():
                return pattern
            case str():
                return re.compile(pattern, re.IGNORECASE)
        msg = f"Custom logging levels keys must be str or compiled regex patterns, got {type(pattern)}"
        raise TypeError(msg)


class LoggingConfig(BaseConfigModel):
    dir: DirectoryPath = Field(default_factory=Path.cwd, description="Log file directory")
    levels: LoggingLevels = Field(default_factory=LoggingLevels, description="Logging levels configuration")
    rich: bool = Field(default=True, description="Enable rich text (colors etc) in TTY output")
