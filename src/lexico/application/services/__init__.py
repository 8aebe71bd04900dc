"""Application services shared by use cases."""

from lexico.application.services.attribute_binder import bind_optional_attribute
from lexico.application.services.capability_probe import (
    DEFAULT_CREATE_CANDIDATES,
    CapabilityProbe,
)
from lexico.application.services.probing_document_store import ProbingDocumentStore

__all__ = [
    "DEFAULT_CREATE_CANDIDATES",
    "CapabilityProbe",
    "ProbingDocumentStore",
    "bind_optional_attribute",
]
