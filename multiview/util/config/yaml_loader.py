# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from __future__ import annotations

import os
import pathlib

from typing import TYPE_CHECKING, Any

import yaml


if TYPE_CHECKING:
    from io import IOBase


class IncludeLoader(yaml.SafeLoader):
    """Safe YAML loader supporting ``!include <path>``, resolved relative to the including file."""

    def __init__(self, stream: IOBase | str, root: pathlib.Path | None = None) -> None:
        if root is None:
            name = getattr(stream, "name", None)
            root = pathlib.Path(name).resolve().parent if isinstance(name, str) else pathlib.Path.cwd()

        self._root: pathlib.Path = root

        super().__init__(stream)

    def include(self, node: yaml.Node) -> Any:
        filename = pathlib.Path(os.path.expandvars(self._root / str(self.construct_scalar(node)))).expanduser()  # pyright: ignore[reportArgumentType]

        with filename.open(encoding="UTF-8") as f:
            return yaml.load(f, IncludeLoader)  # noqa: S506 as IncludeLoader extends yaml.SafeLoader


IncludeLoader.add_constructor("!include", IncludeLoader.include)
