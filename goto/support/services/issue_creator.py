# ============================================
# support/services/issue_creator.py
# ============================================
import logging

from support.models import Issue
from support.repositories import IssueRepository
from support.serializers.issue import IssueAttrsSerializer
from support.services.changeset import Changeset
from support.services.results import Result

logger = logging.getLogger(__name__)

ISSUE_REQUIRED_FIELDS = ("title", "body")


def issue_changeset(issue: Issue, attrs=None, action=None) -> Changeset:
    return Changeset(
        issue,
        attrs,
        IssueAttrsSerializer,
        required=ISSUE_REQUIRED_FIELDS,
        action=action,
    )


def create_issue(user, attrs, repo: IssueRepository) -> Result[Issue]:
    """
    Create an issue owned by ``user``.

    Ownership comes from the caller identity, never from attrs. Either one
    valid row is inserted, or nothing is written and the changeset is
    returned with its errors.
    """
    issue = Issue(user=user)
    changeset = issue_changeset(issue, attrs, action="insert")

    if not changeset.is_valid:
        logger.info("[support] issue rejected user_id=%s errors=%s", user.id, changeset.errors)
        return Result.invalid(changeset)

    repo.insert(changeset.apply())
    logger.info("[support] issue created id=%s user_id=%s", issue.id, user.id)
    return Result.success(issue, changeset)
