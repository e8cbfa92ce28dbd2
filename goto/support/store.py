# ============================================
# support/store.py
# ============================================
"""
IssueTrackingStore: the support context used by the web layer.

Reads return the entity or ``None``; writes return a ``Result`` whose
``error`` is ``VALIDATION_FAILED`` (with the rejected changeset) or
``NOT_FOUND`` (the row vanished under a concurrent delete). Nothing here
raises for either case.

Persistence is injected as repositories so callers and tests can swap
the storage behind the store.
"""
from typing import Optional

from support.repositories import CommentRepository, IssueRepository
from support.services.comment import CommentService
from support.services.issue import IssueService


class IssueTrackingStore(IssueService, CommentService):

    def __init__(
        self,
        issues: Optional[IssueRepository] = None,
        comments: Optional[CommentRepository] = None,
    ):
        IssueService.__init__(self, issues)
        CommentService.__init__(self, comments)


def get_store() -> IssueTrackingStore:
    return IssueTrackingStore()
