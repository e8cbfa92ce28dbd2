from .base import ModelRepository
from .issue_repository import IssueRepository
from .comment_repository import CommentRepository

__all__ = [
    "ModelRepository",
    "IssueRepository",
    "CommentRepository",
]
