# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from typing import Protocol, override, runtime_checkable


# MARK: Protocols
@runtime_checkable
class NamedProtocol(Protocol):
    @property
    def instance_name(self) -> str | None: ...


# MARK: Mixin for Named Classes
class NamedMixin:
    """Mixin that adds an optional name to a class instance.

    The name is used for logging and display purposes; unnamed instances fall back to their class name.
    """

    def __init__(self, *args, instance_name: str | None = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.instance_name = instance_name

    @property
    def instance_name(self) -> str | None:
        return self.__dict__.get("_instance_name")

    @instance_name.setter
    def instance_name(self, new_name: str | None) -> None:
        if new_name is not None and (not isinstance(new_name, str) or not new_name):
            msg = f"Instance name must be a non-empty string or None, got {new_name!r}"
            raise ValueError(msg)
        self.__dict__["_instance_name"] = new_name
        self.on_rename()

    def on_rename(self) -> None:
        """Hook called whenever the instance name changes."""

    @property
    def final_instance_name(self) -> str:
        """The instance name, or the class name when unnamed."""
        return self.instance_name or type(self).__name__

    @override
    def __repr__(self) -> str:
        name = self.final_instance_name
        cls_name = type(self).__name__
        return f"<{name}>" if cls_name in name else f"<{cls_name} {name}>"

    @override
    def __str__(self) -> str:
        return self.final_instance_name
