from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxlist = 6
_repr.maxtuple = 6

_WRAPPED_FLAG = "_xsect_debug_wrapped"


def _is_triple(value: Any) -> bool:
    return all(hasattr(value, attr) for attr in ("x", "y", "z")) and not inspect.isclass(value)


def describe(value: Any, *, max_items: int = 4, max_length: int = 240) -> str:
    """Short, log-friendly rendering of geometry values and containers."""

    if isinstance(value, np.ndarray):
        if value.size <= max_items * 3:
            return f"ndarray{tuple(value.shape)}={_repr.repr(value.tolist())}"
        return f"ndarray{tuple(value.shape)} dtype={value.dtype}"

    if _is_triple(value):
        return f"{type(value).__name__}({value.x!r}, {value.y!r}, {value.z!r})"

    if isinstance(value, (list, tuple)):
        shown = [describe(item) for item in value[:max_items]]
        if len(value) > max_items:
            shown.append(f"... +{len(value) - max_items}")
        body = ", ".join(shown)
        return f"({body})" if isinstance(value, tuple) else f"[{body}]"

    try:
        rendered = _repr.repr(value)
    except Exception as exc:  # pragma: no cover - broken __repr__
        rendered = f"<unrepresentable {type(value).__name__}: {exc!r}>"
    if len(rendered) > max_length:
        return rendered[:max_length] + "..."
    return rendered


def _format_call(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = [describe(arg) for arg in args]
    parts.extend(f"{key}={describe(val)}" for key, val in kwargs.items())
    return ", ".join(parts)


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that logs entry, exit and exceptions at DEBUG."""

    def decorator(func: F) -> F:
        if getattr(func, _WRAPPED_FLAG, False):
            return func

        label = name or getattr(func, "__qualname__", func.__name__)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            enabled = logger.isEnabledFor(logging.DEBUG)
            if enabled:
                logger.debug("-> %s(%s)", label, _format_call(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                if enabled:
                    logger.debug("!! %s raised %r", label, exc)
                raise
            if enabled:
                if log_result:
                    logger.debug("<- %s = %s", label, describe(result))
                else:
                    logger.debug("<- %s", label)
            return result

        setattr(wrapper, _WRAPPED_FLAG, True)
        return cast(F, wrapper)

    return decorator


def _wrap_class(cls: type, logger: logging.Logger, skip: Set[str]) -> None:
    for attr_name, attr_value in list(cls.__dict__.items()):
        if attr_name.startswith("__"):
            continue
        qualified = f"{cls.__name__}.{attr_name}"
        if attr_name in skip or qualified in skip:
            continue
        if isinstance(attr_value, (staticmethod, classmethod)):
            func = attr_value.__func__
            if getattr(func, "__module__", None) != cls.__module__:
                continue
            wrapped = debug_log_call(logger, name=qualified)(func)
            setattr(cls, attr_name, type(attr_value)(wrapped))
        elif inspect.isfunction(attr_value) and attr_value.__module__ == cls.__module__:
            setattr(cls, attr_name, debug_log_call(logger, name=qualified)(attr_value))


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
    wrap_methods: bool = True,
) -> None:
    """Wrap the public functions and methods defined in a module namespace."""

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name or __name__)
    skip_set: Set[str] = set(skip or ())

    for name, value in list(namespace.items()):
        if name in skip_set or name.startswith("_"):
            continue
        if inspect.isfunction(value) and value.__module__ == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)
        elif wrap_methods and inspect.isclass(value) and value.__module__ == module_name:
            _wrap_class(value, logger, skip_set)


__all__ = ["describe", "debug_log_call", "apply_debug_logging"]
