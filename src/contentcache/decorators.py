"""Cache-aside decorator for async functions.

Routes calls to an async function through a cache-aside store, so
repeated calls with the same key are served from the store and
concurrent calls share one execution. The store is passed in
explicitly; there is no module-level configuration.
"""

import functools
import inspect
import re
from collections.abc import Callable
from typing import Any, TypeVar

from contentcache.core.interfaces.cache_store import ICacheStore

F = TypeVar("F", bound=Callable[..., Any])

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def cached(
    store: ICacheStore,
    key: str | Callable[..., str],
) -> Callable[[F], F]:
    """Decorator for cache-aside loading of async function results.

    Args:
        store: The store holding results.
        key: Key template or function to generate the key.
            If string, supports {arg_name} interpolation of the call's
            arguments, positional or keyword.
            If callable, receives (*args, **kwargs) and returns key string.

    Returns:
        Decorated function.

    Example:
        store = InMemoryCacheStore()

        @cached(store, key="content_author:{id}")
        async def get_author(id: str) -> dict:
            return await transport("get", "/content/author", id, {})
    """

    def decorator(func: F) -> F:
        signature = inspect.signature(func)

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            if callable(key):
                cache_key = key(*args, **kwargs)
            else:
                bound = signature.bind(*args, **kwargs)
                bound.apply_defaults()
                cache_key = _interpolate_string(key, bound.arguments)

            return await store.get_or_load(cache_key, lambda: func(*args, **kwargs))

        return wrapper  # type: ignore

    return decorator


def _interpolate_string(template: str, arguments: dict[str, Any]) -> str:
    """Interpolate {arg_name} placeholders in string.

    Args:
        template: String with {arg_name} placeholders.
        arguments: Bound call arguments by parameter name.

    Returns:
        Interpolated string.

    Raises:
        KeyError: If a placeholder names no parameter of the function.
    """

    def replacer(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in arguments:
            raise KeyError(f"Key template refers to unknown argument {name!r}")
        return str(arguments[name])

    return _PLACEHOLDER.sub(replacer, template)
