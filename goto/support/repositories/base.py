# -*- coding: utf-8 -*-
"""
Repository layer (pure DB):
- fetch-all, fetch-one-by-id, insert, update, delete
- every write is a single statement, no retries
- NO business rules (validation, ownership...) - services decide.

Services receive a repository through their constructor.
"""
from __future__ import annotations
from typing import Any, Generic, List, Mapping, Optional, Type, TypeVar

from django.db import models, transaction
from django.db.models import QuerySet
from django.utils import timezone

M = TypeVar("M", bound=models.Model)


class ModelRepository(Generic[M]):
    model: Type[M]

    def __init__(self, model: Optional[Type[M]] = None):
        if model is not None:
            self.model = model

    # ============================
    # Base queries
    # ============================
    def base_qs(self) -> QuerySet[M]:
        return self.model.objects.all()

    def list_all(self) -> List[M]:
        return list(self.base_qs().order_by("id"))

    def get_or_none(self, pk) -> Optional[M]:
        return self.base_qs().filter(pk=pk).first()

    # ============================
    # Mutations (pure DB)
    # ============================
    @transaction.atomic
    def insert(self, obj: M) -> M:
        obj.save(force_insert=True)
        return obj

    @transaction.atomic
    def update(self, obj: M, changes: Mapping[str, Any]) -> bool:
        """
        UPDATE only the changed columns (+ updated_at) for row obj.pk.
        The changes are written onto obj only when a row matched.
        Returns False when the row no longer exists; never re-INSERTs.
        """
        values = dict(changes)
        if hasattr(obj, "updated_at"):
            values["updated_at"] = timezone.now()
        if self.base_qs().filter(pk=obj.pk).update(**values) == 0:
            return False
        for name, value in values.items():
            setattr(obj, name, value)
        return True

    @transaction.atomic
    def delete(self, obj: M) -> bool:
        """Delete row obj.pk (FK cascades apply). False if it was already gone."""
        _, per_model = self.base_qs().filter(pk=obj.pk).delete()
        return per_model.get(self.model._meta.label, 0) > 0
