"""Small shared helpers."""

from __future__ import annotations

import asyncio
import functools
from collections.abc import Awaitable, Callable, Hashable, Mapping
from typing import Any

from .core.exceptions import CallbackError, MissingFunctionError


def reverse_key_values(mapping: Mapping[Any, Hashable]) -> dict[Hashable, Any]:
    """Swap keys and values.

    When several keys share a value, the last one wins.

    Example:
        >>> reverse_key_values({"a": 1, "b": 2})
        {1: 'a', 2: 'b'}
    """
    return {value: key for key, value in mapping.items()}


def noop(*args: Any, **kwargs: Any) -> None:
    """Do nothing."""


def promisify(
    fn: Callable[..., Any] | str,
    target: Any = None,
) -> Callable[..., Awaitable[Any]]:
    """Wrap a callback-style function as a coroutine function.

    The wrapped function is called with the given arguments plus a trailing
    ``callback(error, response)``. The returned coroutine resolves with
    ``response`` or raises ``error`` on the next loop turn after the
    callback fires. Callbacks may fire from any thread.

    Args:
        fn: Callable, or name of a method looked up on ``target``
        target: Object providing ``fn`` when it is given by name

    Returns:
        Coroutine function taking the remaining arguments

    Raises:
        MissingFunctionError: When awaited, if ``fn`` cannot be resolved to
            a callable
    """

    async def wrapper(*args: Any) -> Any:
        if callable(fn):
            func = fn
        elif isinstance(fn, str):
            func = getattr(target, fn, None)
        else:
            func = None
        if func is None or not callable(func):
            raise MissingFunctionError(f"Missing function for promisify: {fn!r}")

        loop = asyncio.get_running_loop()
        future: asyncio.Future[Any] = loop.create_future()

        def settle(error: Any, response: Any) -> None:
            if future.done():
                return
            if error is None:
                future.set_result(response)
            elif isinstance(error, BaseException):
                future.set_exception(error)
            else:
                future.set_exception(CallbackError(str(error), error=error))

        def callback(error: Any = None, response: Any = None) -> None:
            loop.call_soon_threadsafe(settle, error, response)

        func(*args, callback)
        return await future

    if callable(fn):
        return functools.wraps(fn)(wrapper)
    return wrapper
