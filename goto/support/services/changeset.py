# -*- coding: utf-8 -*-
"""
Changeset: proposed attrs for a model instance, cast and validated
without touching the database.

- Casting goes field by field through an attrs serializer. The serializer's
  declared fields are the allow-list; any other key in attrs is dropped.
- ``changes`` keeps only values that differ from the instance.
- Required fields are checked on the merged state (instance + changes), so
  an update that leaves a required field alone passes, and one that blanks
  it fails.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type

from django.db import models
from rest_framework import serializers

REQUIRED_MESSAGE = "This field is required."


class Changeset:

    def __init__(
        self,
        instance: models.Model,
        attrs: Optional[Mapping[str, Any]],
        serializer_class: Type[serializers.Serializer],
        *,
        required: Iterable[str] = (),
        action: Optional[str] = None,
    ):
        self.instance = instance
        self.params: Dict[str, Any] = dict(attrs or {})
        self.required = list(required)
        self.action = action
        self.changes: Dict[str, Any] = {}
        self.errors: Dict[str, List[str]] = {}
        self.fields = serializer_class().fields

        self._cast()
        self._validate_required()

    def __repr__(self) -> str:
        return (
            f"<Changeset {type(self.instance).__name__} action={self.action} "
            f"changes={self.changes} errors={self.errors} valid={self.is_valid}>"
        )

    # ============================
    # Validation
    # ============================
    def _cast(self) -> None:
        for name, field in self.fields.items():
            if name not in self.params:
                continue
            try:
                value = field.run_validation(self.params[name])
            except serializers.ValidationError as exc:
                self.add_error(name, *exc.detail)
                continue
            if getattr(self.instance, name) != value:
                self.changes[name] = value

    def _validate_required(self) -> None:
        for name in self.required:
            if name in self.errors:
                continue
            value = self.get_field(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                self.add_error(name, REQUIRED_MESSAGE)

    def add_error(self, field: str, *messages: Any) -> None:
        self.errors.setdefault(field, []).extend(str(m) for m in messages)

    # ============================
    # Accessors
    # ============================
    @property
    def is_valid(self) -> bool:
        return not self.errors

    def get_field(self, name: str) -> Any:
        if name in self.changes:
            return self.changes[name]
        return getattr(self.instance, name, None)

    @property
    def data(self) -> Dict[str, Any]:
        """Merged state for re-rendering a form; rejected raw values are kept."""
        merged = {name: self.get_field(name) for name in self.fields}
        for name in self.errors:
            if name in self.params and name in merged:
                merged[name] = self.params[name]
        return merged

    def apply(self) -> models.Model:
        """Write the changes onto the instance in memory and return it."""
        for name, value in self.changes.items():
            setattr(self.instance, name, value)
        return self.instance
