"""Best-effort assignment of optional attributes on heterogeneous entity shapes.

An attribute is bound only when the entity declares a public, writable field
whose name matches one of the given spellings (case-insensitive) and the value
is an instance of, or numerically convertible to, the declared type. Every
other outcome is a silent no-op for the caller; skips are logged.
"""

import inspect
import logging
import typing
from collections.abc import Iterable
from decimal import Decimal
from types import NoneType, UnionType
from typing import Any

logger = logging.getLogger(__name__)

_NUMERIC_TYPES: tuple[type, ...] = (int, float, Decimal)
_UNDECLARED = object()


def _writable_fields(entity: object) -> dict[str, Any]:
    """Public writable attribute name -> declared type (_UNDECLARED if unknown)."""
    cls = type(entity)
    try:
        hints = typing.get_type_hints(cls)
    except (NameError, TypeError):
        hints = {}
        for klass in reversed(cls.__mro__):
            hints.update(getattr(klass, "__annotations__", {}))

    fields: dict[str, Any] = {}
    for name, hint in hints.items():
        if name.startswith("_") or typing.get_origin(hint) is typing.ClassVar:
            continue
        fields[name] = hint

    for name in dir(cls):
        if name.startswith("_"):
            continue
        attr = inspect.getattr_static(cls, name, None)
        if isinstance(attr, property):
            if attr.fset is None:
                fields.pop(name, None)
                continue
            fields[name] = _property_type(attr)

    # plain instances assigned in __init__ carry no annotations
    for name, current in getattr(entity, "__dict__", {}).items():
        if name.startswith("_") or name in fields or callable(current):
            continue
        if isinstance(inspect.getattr_static(cls, name, None), property):
            continue
        fields[name] = _UNDECLARED if current is None else type(current)
    return fields


def _property_type(prop: property) -> Any:
    try:
        hints = typing.get_type_hints(prop.fset)
    except (NameError, TypeError):
        return _UNDECLARED
    params = [n for n in inspect.signature(prop.fset).parameters][1:]
    if params and params[0] in hints:
        return hints[params[0]]
    return _UNDECLARED


def _coerce(value: object, declared: Any) -> object:
    """Return value converted to the declared type, or raise TypeError/ValueError."""
    if declared is _UNDECLARED or declared is Any:
        return value

    origin = typing.get_origin(declared)
    if origin is typing.Union or origin is UnionType:
        args = typing.get_args(declared)
        if value is None:
            if NoneType in args:
                return None
            raise TypeError("None is not assignable to a non-optional field")
        options = [a for a in args if a is not NoneType]
        for option in options:
            if isinstance(option, type) and _is_instance(value, option):
                return value
        for option in options:
            try:
                return _coerce(value, option)
            except (TypeError, ValueError, ArithmeticError):
                continue
        raise TypeError(f"{type(value).__name__} is not assignable to {declared}")

    if not isinstance(declared, type):
        raise TypeError(f"Unsupported declared type {declared!r}")
    if _is_instance(value, declared):
        return value
    if (
        declared in _NUMERIC_TYPES
        and isinstance(value, _NUMERIC_TYPES)
        and not isinstance(value, bool)
    ):
        return declared(value)
    raise TypeError(f"{type(value).__name__} is not assignable to {declared.__name__}")


def _is_instance(value: object, declared: type) -> bool:
    # bool is an int subclass but not a size, count or id
    if isinstance(value, bool) and declared is not bool:
        return False
    return isinstance(value, declared)


def bind_optional_attribute(
    entity: object, spellings: Iterable[str], value: object
) -> list[str]:
    """Try each spelling independently; return the field names actually assigned.

    Never raises.
    """
    entity_type = type(entity).__name__
    try:
        fields = _writable_fields(entity)
    except Exception:
        logger.debug("Could not introspect %s for optional attributes", entity_type, exc_info=True)
        return []

    by_folded: dict[str, str] = {}
    for name in fields:
        by_folded.setdefault(name.casefold(), name)

    bound: list[str] = []
    for spelling in spellings:
        if not isinstance(spelling, str):
            logger.debug("Ignored non-string spelling %r for %s", spelling, entity_type)
            continue
        name = by_folded.get(spelling.casefold())
        if name is None:
            logger.debug("%s has no writable attribute %r", entity_type, spelling)
            continue
        try:
            setattr(entity, name, _coerce(value, fields[name]))
        except Exception as e:
            logger.debug("Skipped %s.%s: %s", entity_type, name, e)
            continue
        if name not in bound:
            bound.append(name)
    return bound
