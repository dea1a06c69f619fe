# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import functools

from collections.abc import Callable
from typing import Any, Concatenate, NotRequired, TypedDict, Unpack


# MARK: Wrapper Property
type Wrapped[**P, R] = Callable[P, R]
type Wrapper[**P, R] = Callable[Concatenate[Wrapped[P, R], P], R]


# MARK: Wrapper Decorator
class WrapperDecorator[**P, R]:
    def __init__(self, wrapper: Wrapper[P, R]) -> None:
        self.wrapper = wrapper

    def __call__(self, method: Wrapped[P, R]) -> Wrapped[P, R]:
        return self.decorate(wrapped=method, wrapper=self.wrapper)

    @staticmethod
    def decorate(wrapped: Wrapped[P, R], wrapper: Wrapper[P, R]) -> Wrapped[P, R]:
        # A plain function (rather than a partial) so the result still binds as a method
        @functools.wraps(wrapped)
        def _decorated(*args: P.args, **kwargs: P.kwargs) -> R:
            return wrapper(wrapped, *args, **kwargs)

        return _decorated


# MARK: Before Wrapper Decorator
type BeforeMethod[**P, R] = Callable[Concatenate[Wrapped[P, R], P], None]


class BeforeDecorator[**P, R](WrapperDecorator[P, R]):
    def __init__(self, before: BeforeMethod[P, R]) -> None:
        super().__init__(wrapper=functools.partial(self.before_wrapper, before))

    @staticmethod
    def before_wrapper(before: BeforeMethod[P, R], wrapped: Wrapped[P, R], *args: P.args, **kwargs: P.kwargs) -> R:
        before(wrapped, *args, **kwargs)
        return wrapped(*args, **kwargs)


# MARK: Before attribute check decorator
class BeforeAttributeCheckOptions(TypedDict):
    attribute: str
    desired: Any
    message: NotRequired[str | None]
    exception: NotRequired[type[Exception]]


class BeforeAttributeCheckDecorator(BeforeDecorator[..., Any]):
    """Decorator that verifies an attribute of the bound instance before calling the wrapped method.

    The check compares ``getattr(instance, attribute)`` against ``desired`` and raises ``exception``
    (``ValueError`` by default) when they differ.
    """

    def __init__(self, **options: Unpack[BeforeAttributeCheckOptions]) -> None:
        self.options = options
        super().__init__(before=self.before_attribute_check)

    def before_attribute_check(self, wrapped: Wrapped[..., Any], target: object, /, *args: Any, **kwargs: Any) -> None:
        attr = self.options["attribute"]
        desired = self.options["desired"]

        if getattr(target, attr, None) == desired:
            return

        message = self.options.get("message", None) or f"Attribute '{attr}' must be {desired}"
        exception = self.options.get("exception", ValueError)
        msg = f"{message} when calling {type(target).__name__}.{wrapped.__name__} on {target!s}"
        raise exception(msg)


def before_attribute_check(
    *, attribute: str, desired: Any, message: str | None = None, exception: type[Exception] = ValueError
) -> BeforeAttributeCheckDecorator:
    return BeforeAttributeCheckDecorator(attribute=attribute, desired=desired, message=message, exception=exception)
