# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from typing import override

from ..helpers import mro
from ..logging import LoggableProtocol, Logger, getLogger
from .named import NamedMixin, NamedProtocol


# Key under which an instance caches its logger
_LOG_CACHE = "__log"


class LoggableMixin:
    """Mixin that adds a logger to a class.

    Instances get a ``log`` property. Named instances log under their instance name, and instances exposing a
    loggable ``instance_parent`` log as a child of their parent's logger. Code running at class level (e.g. in a
    classmethod) logs through :meth:`class_log` instead.
    """

    def __init_subclass__(cls) -> None:
        super().__init_subclass__()
        mro.ensure_mro_order(cls, LoggableMixin, before=(NamedMixin, NamedProtocol))

    # MARK: Logging
    @property
    def log(self) -> Logger:
        if (log := vars(self).get(_LOG_CACHE)) is not None:
            return log

        parent = getattr(self, "instance_parent", None)
        log = getLogger(self.__log_name__, parent=parent if isinstance(parent, LoggableProtocol) else None)
        vars(self)[_LOG_CACHE] = log
        return log

    @classmethod
    def class_log(cls) -> Logger:
        """Return the class-level logger, named ``T(<class name>)``."""
        return getLogger(f"T({cls.__name__})")

    def _reset_log_cache(self) -> None:
        vars(self).pop(_LOG_CACHE, None)

    @property
    def __log_name__(self) -> str:
        """The logger name: the instance name if set, the class name otherwise."""
        if isinstance(self, NamedProtocol) and (name := self.instance_name) is not None:
            return name
        return type(self).__name__

    # MARK: Printing
    @override
    def __repr__(self) -> str:
        name = self.__log_name__
        cls_name = type(self).__name__
        return f"<{name}>" if cls_name in name else f"<{cls_name} {name}>"


class LoggableNamedMixin(LoggableMixin, NamedMixin):
    """Mixin combining logging and naming support: renaming an instance also renames its logger."""

    @override
    def on_rename(self) -> None:
        super().on_rename()
        self._reset_log_cache()
