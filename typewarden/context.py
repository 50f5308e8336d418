"""
Runtime configuration for programmer-error reporting (the fail hook).
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import NoReturn

from .exceptions import DescriptorError
from .types import FailHook


def raise_descriptor_error(message: str) -> NoReturn:
    """Default fail hook: raise immediately."""
    raise DescriptorError(message)


# Context variable for the fail hook
_fail_hook: ContextVar[FailHook] = ContextVar("fail_hook", default=raise_descriptor_error)


def get_fail_hook() -> FailHook:
    """Return the hook currently used to report API misuse."""
    return _fail_hook.get()


def configure(*, fail: FailHook) -> None:
    """
    Replace the fail hook for the current context.

    Meant to be called once at startup. A hook that returns instead of
    raising does not let validation continue: the engine raises
    DescriptorError right after the hook returns.
    """
    if not callable(fail):
        raise TypeError(f"fail hook must be callable, got {fail!r}")
    _fail_hook.set(fail)


@contextmanager
def validation_context(*, fail: FailHook):
    """
    Context manager scoping a fail hook override.

    Example:
        from typewarden import validate, validation_context

        def log_and_raise(message):
            logger.error(message)
            raise RuntimeError(message)

        with validation_context(fail=log_and_raise):
            validate(value, "not a descriptor")  # RuntimeError!
    """
    if not callable(fail):
        raise TypeError(f"fail hook must be callable, got {fail!r}")
    token = _fail_hook.set(fail)
    try:
        yield
    finally:
        _fail_hook.reset(token)
