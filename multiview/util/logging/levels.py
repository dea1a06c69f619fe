# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from __future__ import annotations

import logging

from typing import Any, ClassVar, override

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, PydanticUseDefault, core_schema


# Disables a handler altogether
OFF: int = -1

LEVELS : dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR"   : logging.ERROR   ,
    "WARNING" : logging.WARNING ,
    "INFO"    : logging.INFO    ,
    "DEBUG"   : logging.DEBUG   ,
    "NOTSET"  : logging.NOTSET  ,
    "OFF"     : OFF             ,
    "FALSE"   : OFF             ,
}  # fmt: skip

NAMES: dict[int, str] = {level: name for name, level in LEVELS.items() if name != "FALSE"}


class LoggingLevel:
    """A logging level as used by the configuration.

    Accepts level names (case-insensitive), integers, booleans (``True`` means ``INFO``, ``False`` means ``OFF``)
    and the special ``OFF`` level (``-1``), which disables a handler altogether.

    >>> from multiview.util.logging.levels import LoggingLevel
    >>> LoggingLevel("debug")
    LoggingLevel.DEBUG
    >>> LoggingLevel(False).name
    'OFF'
    >>> LoggingLevel("25") == 25
    True
    """

    # fmt: off
    CRITICAL : ClassVar[LoggingLevel]
    ERROR    : ClassVar[LoggingLevel]
    WARNING  : ClassVar[LoggingLevel]
    INFO     : ClassVar[LoggingLevel]
    DEBUG    : ClassVar[LoggingLevel]
    NOTSET   : ClassVar[LoggingLevel]
    OFF      : ClassVar[LoggingLevel]
    # fmt: on

    def __init__(self, value: Any) -> None:
        self.value: int = type(self).coerce(value)

    # MARK: Coercion
    @classmethod
    def coerce(cls, value: Any) -> int:
        match value:
            case LoggingLevel():
                return value.value
            case bool():
                level = logging.INFO if value else OFF
            case str():
                level = cls._parse(value)
            case int():
                level = value
            case _:
                msg = f"Invalid type for logging level: {type(value)}"
                raise TypeError(msg)

        if level < OFF:
            msg = f"Invalid value for logging level: {level}"
            raise ValueError(msg)
        return level

    @staticmethod
    def _parse(value: str) -> int:
        if (level := LEVELS.get(value.strip().upper())) is not None:
            return level
        try:
            return int(value)
        except ValueError as err:
            msg = f"Unknown logging level string: {value}"
            raise ValueError(msg) from err

    # MARK: Pydantic
    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        accepted = [
            core_schema.is_instance_schema(LoggingLevel),
            core_schema.bool_schema(strict=True),
            core_schema.int_schema(),
            core_schema.str_schema(),
            core_schema.none_schema(),
        ]
        return core_schema.no_info_after_validator_function(
            function=cls.validate,
            schema=core_schema.union_schema(accepted),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def validate(cls, value: Any) -> LoggingLevel:
        # 'None' falls back to the field default
        if value is None:
            raise PydanticUseDefault
        return cls(value)

    # MARK: Accessors
    @property
    def name(self) -> str:
        return NAMES.get(self.value, str(self.value))

    @property
    def enabled(self) -> bool:
        return self.value != OFF

    @property
    def logger_level(self) -> int:
        """The level to give a logger or handler. ``OFF`` maps above ``CRITICAL``, so that nothing gets through."""
        return logging.CRITICAL + 1 if self.value == OFF else self.value

    def __int__(self) -> int:
        return self.value

    # MARK: Comparison
    @override
    def __eq__(self, other: object) -> bool:
        match other:
            case LoggingLevel():
                return self.value == other.value
            case int():
                return self.value == other
            case str():
                return self.name == other.upper()
        return False

    @override
    def __hash__(self) -> int:
        return hash(self.value)

    # MARK: Printing
    @override
    def __repr__(self) -> str:
        name = NAMES.get(self.value)
        return f"LoggingLevel.{name}" if name is not None else f"LoggingLevel({self.value})"

    @override
    def __str__(self) -> str:
        return self.name


for _value, _name in NAMES.items():
    setattr(LoggingLevel, _name, LoggingLevel(_value))
