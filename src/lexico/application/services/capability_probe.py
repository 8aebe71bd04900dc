"""Discover and invoke the create operation a document store happens to expose.

Stores are not required to share an interface for writes. The probe walks an
ordered list of conventional "create" names and picks the first public instance
method that matches case-insensitively and is eligible:

* it is a coroutine function;
* it binds exactly one positional argument, compatible with the document;
  any further parameters have defaults;
* its return annotation, when present, is ``int``.

The first eligible method is awaited once. Its errors propagate unchanged and
no later candidate is tried.
"""

import inspect
import logging
import typing
from collections.abc import Awaitable, Callable, Sequence
from types import UnionType
from typing import Any

from lexico.domain.entities import Document
from lexico.domain.exceptions import InvalidPersistenceResult, UnsupportedBackingStore

logger = logging.getLogger(__name__)

DEFAULT_CREATE_CANDIDATES: tuple[str, ...] = (
    "create",
    "insert",
    "add",
    "save",
    "guardar",
    "cargar",
    "subir",
)

CreateOperation = Callable[[Document], Awaitable[Any]]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class CapabilityProbe:
    """Resolves a store's create operation by name, in priority order."""

    def __init__(self, candidates: Sequence[str] = DEFAULT_CREATE_CANDIDATES) -> None:
        if not candidates:
            raise ValueError("At least one candidate operation name is required")
        self._candidates = tuple(candidates)

    @property
    def candidates(self) -> tuple[str, ...]:
        return self._candidates

    def resolve(self, repository: object, document: Document) -> CreateOperation:
        """Return the first eligible bound create operation of repository."""
        public = sorted(n for n in dir(repository) if not n.startswith("_"))
        for candidate in self._candidates:
            wanted = candidate.casefold()
            for name in public:
                if name.casefold() != wanted:
                    continue
                operation = _eligible_operation(repository, name, document)
                if operation is not None:
                    logger.debug(
                        "Using %s.%s to create documents", type(repository).__name__, name
                    )
                    return operation
        raise UnsupportedBackingStore(type(repository).__name__, self._candidates)

    async def persist(self, repository: object, document: Document) -> int:
        """Create document through the resolved operation; return the assigned id."""
        operation = self.resolve(repository, document)
        result = await operation(document)
        if isinstance(result, bool) or not isinstance(result, int):
            raise InvalidPersistenceResult(
                f"{type(repository).__name__}.{operation.__name__} returned "
                f"{type(result).__name__}, expected int"
            )
        return result


def _eligible_operation(
    repository: object, name: str, document: Document
) -> CreateOperation | None:
    try:
        static = inspect.getattr_static(repository, name)
    except AttributeError:
        return None
    if isinstance(static, (staticmethod, classmethod)):
        return None

    operation = getattr(repository, name, None)
    if not inspect.ismethod(operation) or operation.__self__ is not repository:
        return None
    if not inspect.iscoroutinefunction(operation):
        return None

    try:
        signature = inspect.signature(operation)
    except (TypeError, ValueError):
        return None
    params = list(signature.parameters.values())
    positional = [p for p in params if p.kind in _POSITIONAL]
    if not positional or any(p.default is p.empty for p in positional[1:]):
        return None
    for p in params:
        if p.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is p.empty:
            return None

    try:
        hints = typing.get_type_hints(operation)
    except (NameError, TypeError):
        hints = {}
    if not _accepts(hints.get(positional[0].name, Any), document):
        return None
    returns = hints.get("return", int)
    if returns is not int:
        return None
    return operation


def _accepts(hint: Any, document: Document) -> bool:
    if hint is Any:
        return True
    origin = typing.get_origin(hint)
    if origin is typing.Union or origin is UnionType:
        return any(_accepts(arg, document) for arg in typing.get_args(hint))
    if not isinstance(hint, type):
        return True
    try:
        return isinstance(document, hint)
    except TypeError:
        # non runtime-checkable protocols
        return True
