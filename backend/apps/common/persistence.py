"""Document-style persistence adapters.

Stores talk to one ``DocumentAdapter`` and never branch on connectivity. Two
variants exist: ``ModelDocumentAdapter`` maps documents onto a Django model and
``InMemoryDocumentAdapter`` keeps them in process. Neither raises on storage
failure; every call returns an ``AdapterResult`` that either carries a value or
the ``AdapterUnavailableError`` describing why the backend could not serve it.
"""
from __future__ import annotations

import copy
import threading
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    List,
    Mapping,
    Optional,
    Protocol,
    Type,
    TypeVar,
)

from django.conf import settings
from django.db import models

from .logger import get_logger
from .repository import GenericRepository

logger = get_logger(__name__, component="common", layer="persistence")

Document = Dict[str, Any]
V = TypeVar("V")
M = TypeVar("M", bound=models.Model)


class AdapterUnavailableError(Exception):
    """The persistence backend is unreachable or failed while serving a call."""

    def __init__(self, adapter: str, operation: str, reason: str):
        super().__init__(f"{adapter}.{operation} unavailable: {reason}")
        self.adapter = adapter
        self.operation = operation
        self.reason = reason


@dataclass(frozen=True)
class AdapterResult(Generic[V]):
    value: Optional[V] = None
    error: Optional[AdapterUnavailableError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[V] = None) -> "AdapterResult[V]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: AdapterUnavailableError) -> "AdapterResult[V]":
        return cls(error=error)


class DocumentAdapter(Protocol):
    name: str

    def find_all(self, limit: Optional[int] = None) -> AdapterResult[List[Document]]:
        ...

    def find_one(self, **filters) -> AdapterResult[Optional[Document]]:
        ...

    def insert_many(self, documents: Iterable[Mapping[str, Any]]) -> AdapterResult[int]:
        ...

    def save(self, document: Mapping[str, Any]) -> AdapterResult[Document]:
        ...

    def count(self) -> AdapterResult[int]:
        ...


class InMemoryDocumentAdapter:
    """Process-local document list; used whenever no database is configured."""

    def __init__(self, name: str):
        self.name = name
        self._documents: List[Document] = []
        self._lock = threading.Lock()

    def find_all(self, limit: Optional[int] = None) -> AdapterResult[List[Document]]:
        with self._lock:
            docs = self._documents if limit is None else self._documents[:limit]
            return AdapterResult.success(copy.deepcopy(docs))

    def find_one(self, **filters) -> AdapterResult[Optional[Document]]:
        with self._lock:
            for doc in self._documents:
                if all(doc.get(key) == value for key, value in filters.items()):
                    return AdapterResult.success(copy.deepcopy(doc))
        return AdapterResult.success(None)

    def insert_many(self, documents: Iterable[Mapping[str, Any]]) -> AdapterResult[int]:
        rows = [copy.deepcopy(dict(doc)) for doc in documents]
        with self._lock:
            self._documents.extend(rows)
        return AdapterResult.success(len(rows))

    def save(self, document: Mapping[str, Any]) -> AdapterResult[Document]:
        row = copy.deepcopy(dict(document))
        with self._lock:
            self._documents.append(row)
        return AdapterResult.success(copy.deepcopy(row))

    def count(self) -> AdapterResult[int]:
        with self._lock:
            return AdapterResult.success(len(self._documents))


class ModelDocumentAdapter(GenericRepository[M]):
    """Django ORM adapter.

    ``to_document`` turns a model instance into the document shape the stores
    use; ``from_document`` turns a document into model field kwargs. Any error
    raised by the database layer (connection refused, timeout, missing table,
    integrity failure) is reported as an ``AdapterUnavailableError`` result.
    """

    def __init__(
        self,
        model: Type[M],
        *,
        name: str,
        to_document: Callable[[M], Document],
        from_document: Callable[[Mapping[str, Any]], Dict[str, Any]],
    ):
        super().__init__(model)
        self.name = name
        self.to_document = to_document
        self.from_document = from_document
        self.logger = logger.bind(adapter=name)

    def find_all(self, limit: Optional[int] = None) -> AdapterResult[List[Document]]:
        return self._call(
            "find_all", lambda: [self.to_document(obj) for obj in self.list(limit=limit)]
        )

    def find_one(self, **filters) -> AdapterResult[Optional[Document]]:
        def run():
            obj = self.get(**filters)
            return self.to_document(obj) if obj is not None else None

        return self._call("find_one", run)

    def insert_many(self, documents: Iterable[Mapping[str, Any]]) -> AdapterResult[int]:
        rows = [self.from_document(doc) for doc in documents]
        return self._call("insert_many", lambda: len(self.bulk_create(rows)))

    def save(self, document: Mapping[str, Any]) -> AdapterResult[Document]:
        return self._call(
            "save", lambda: self.to_document(self.create(**self.from_document(document)))
        )

    def count(self) -> AdapterResult[int]:
        return self._call("count", lambda: super(ModelDocumentAdapter, self).count())

    def _call(self, operation: str, func: Callable[[], V]) -> AdapterResult[V]:
        try:
            return AdapterResult.success(func())
        except Exception as exc:  # any backend failure degrades to "unavailable"
            error = AdapterUnavailableError(self.name, operation, str(exc))
            self.logger.warning(
                "Adapter call failed",
                operation=operation,
                error=str(exc),
                exception=exc.__class__.__name__,
            )
            return AdapterResult.failure(error)


def build_document_adapter(
    model: Type[M],
    *,
    name: str,
    to_document: Callable[[M], Document],
    from_document: Callable[[Mapping[str, Any]], Dict[str, Any]],
) -> DocumentAdapter:
    """Pick the adapter variant once, from ``settings.PERSISTENCE_ENABLED``."""
    if getattr(settings, "PERSISTENCE_ENABLED", False):
        logger.info("Using database adapter", adapter=name, model=model.__name__)
        return ModelDocumentAdapter(
            model, name=name, to_document=to_document, from_document=from_document
        )
    logger.info("Using in-memory adapter", adapter=name)
    return InMemoryDocumentAdapter(name)


__all__ = [
    "AdapterResult",
    "AdapterUnavailableError",
    "Document",
    "DocumentAdapter",
    "InMemoryDocumentAdapter",
    "ModelDocumentAdapter",
    "build_document_adapter",
]
