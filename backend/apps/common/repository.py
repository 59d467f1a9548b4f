from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar

from django.db import models, transaction

T = TypeVar('T', bound=models.Model)


class GenericRepository(Generic[T]):
    """Thin ORM access layer shared by the model-backed document adapters."""

    def __init__(self, model: Type[T]):
        self.model = model

    def get(self, **filters) -> Optional[T]:
        return self.model.objects.filter(**filters).first()

    def list(self, limit: Optional[int] = None, **filters) -> List[T]:
        qs = self.model.objects.filter(**filters)
        if limit is not None:
            qs = qs[:limit]
        return list(qs)

    def count(self, **filters) -> int:
        return self.model.objects.filter(**filters).count()

    def create(self, **data) -> T:
        return self.model.objects.create(**data)

    def bulk_create(self, rows: Iterable[Dict[str, Any]]) -> List[T]:
        instances = [self.model(**row) for row in rows]
        with transaction.atomic():
            return self.model.objects.bulk_create(instances)
