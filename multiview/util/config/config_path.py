# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from __future__ import annotations

import sys

from io import TextIOBase
from pathlib import Path
from typing import Any, override


class ConfigFilePath:
    """Path to a configuration file, where ``-`` stands for standard input."""

    def __init__(self, path: str | Path) -> None:
        if not isinstance(path, (str, Path)):
            msg = f"Expected a string or Path, got {type(path).__name__}"
            raise TypeError(msg)

        if str(path) != "-" and not Path(path).is_file():
            msg = f"Configuration file not found: {path}"
            raise FileNotFoundError(msg)
        self.file_path: Path | str = Path(path) if str(path) != "-" else "-"

    def open(self, encoding: str = "UTF-8") -> TextIOBase:
        if isinstance(self.file_path, Path):
            return self.file_path.open(mode="r", encoding=encoding)  # pyright: ignore[reportReturnType]

        if not isinstance(sys.stdin, TextIOBase):
            msg = "Standard input is not a text stream"
            raise TypeError(msg)
        return sys.stdin

    @property
    def is_stdin(self) -> bool:
        return self.file_path == "-"

    @override
    def __str__(self) -> str:
        if isinstance(self.file_path, Path):
            return self.file_path.as_posix()
        return self.file_path

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self!s}')"

    @staticmethod
    def coerce(path: Any) -> ConfigFilePath:
        return path if isinstance(path, ConfigFilePath) else ConfigFilePath(path)
