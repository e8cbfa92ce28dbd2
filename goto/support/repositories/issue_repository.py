# -*- coding: utf-8 -*-
from __future__ import annotations

from support.models import Issue
from support.repositories.base import ModelRepository


class IssueRepository(ModelRepository[Issue]):
    model = Issue
