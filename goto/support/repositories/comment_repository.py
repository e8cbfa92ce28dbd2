# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import List

from django.db.models import QuerySet

from support.models import Comment
from support.repositories.base import ModelRepository


class CommentRepository(ModelRepository[Comment]):
    model = Comment

    def for_issue_qs(self, issue_id: int) -> QuerySet[Comment]:
        # user is a NOT NULL FK, so select_related emits an INNER JOIN
        return (
            self.base_qs()
            .filter(issue_id=issue_id)
            .select_related("user")
            .order_by("inserted_at", "id")
        )

    def list_for_issue(self, issue_id: int) -> List[Comment]:
        return list(self.for_issue_qs(issue_id))
