# ============================================
# support/services/comment.py
# ============================================
import logging
from typing import Dict, List, Optional

from support.models import Comment, Issue
from support.repositories import CommentRepository
from support.serializers.comment import CommentAttrsSerializer
from support.services.changeset import Changeset
from support.services.results import Result

logger = logging.getLogger(__name__)

COMMENT_REQUIRED_FIELDS = ("body",)


def comment_changeset(comment: Comment, attrs=None, action=None) -> Changeset:
    return Changeset(
        comment,
        attrs,
        CommentAttrsSerializer,
        required=COMMENT_REQUIRED_FIELDS,
        action=action,
    )


class CommentService:

    def __init__(self, comments: Optional[CommentRepository] = None):
        self.comments = comments or CommentRepository()

    def list_comments(self, issue: Issue) -> List[Comment]:
        """Comments of an issue with their authors, oldest first"""
        return self.comments.list_for_issue(issue.id)

    def get_comment(self, comment_id: int) -> Optional[Comment]:
        return self.comments.get_or_none(comment_id)

    def create_comment(self, issue: Issue, user, attrs: Optional[Dict] = None) -> Result[Comment]:
        """
        Create a comment on ``issue`` authored by ``user``.

        The author is always the caller; attrs can only carry ``body``.
        On success the returned comment holds the given ``user`` object
        as its author instead of reloading it.
        """
        comment = Comment(issue=issue, user_id=user.id)
        changeset = comment_changeset(comment, attrs, action="insert")

        if not changeset.is_valid:
            logger.info(
                "[support] comment rejected issue_id=%s user_id=%s errors=%s",
                issue.id, user.id, changeset.errors
            )
            return Result.invalid(changeset)

        self.comments.insert(changeset.apply())
        comment.user = user

        logger.info("[support] comment created id=%s issue_id=%s user_id=%s", comment.id, issue.id, user.id)
        return Result.success(comment, changeset)

    def update_comment(self, comment: Comment, attrs: Dict) -> Result[Comment]:
        changeset = comment_changeset(comment, attrs, action="update")

        if not changeset.is_valid:
            logger.info("[support] comment update rejected id=%s errors=%s", comment.id, changeset.errors)
            return Result.invalid(changeset)

        if not changeset.changes:
            return Result.success(comment, changeset)

        if not self.comments.update(comment, changeset.changes):
            logger.warning("[support] comment update on missing row id=%s", comment.id)
            return Result.not_found()

        logger.info("[support] comment updated id=%s", comment.id)
        return Result.success(comment, changeset)

    def delete_comment(self, comment: Comment) -> Result[Comment]:
        if not self.comments.delete(comment):
            logger.warning("[support] comment delete on missing row id=%s", comment.id)
            return Result.not_found()

        logger.info("[support] comment deleted id=%s issue_id=%s", comment.id, comment.issue_id)
        return Result.success(comment)

    def change_comment(self, comment: Comment) -> Changeset:
        return comment_changeset(comment)
