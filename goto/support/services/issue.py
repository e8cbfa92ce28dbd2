# ============================================
# support/services/issue.py
# ============================================
import logging
from typing import Dict, List, Optional

from support.models import Issue
from support.repositories import IssueRepository
from support.services import issue_creator
from support.services.changeset import Changeset
from support.services.results import Result

logger = logging.getLogger(__name__)


class IssueService:

    def __init__(self, issues: Optional[IssueRepository] = None):
        self.issues = issues or IssueRepository()

    def list_issues(self) -> List[Issue]:
        return self.issues.list_all()

    def get_issue(self, issue_id: int) -> Optional[Issue]:
        """Get single issue, None if it does not exist"""
        return self.issues.get_or_none(issue_id)

    def create_issue(self, user, attrs: Optional[Dict] = None) -> Result[Issue]:
        return issue_creator.create_issue(user, attrs, self.issues)

    def update_issue(self, issue: Issue, attrs: Dict) -> Result[Issue]:
        """Update issue through the same rules as creation"""
        changeset = issue_creator.issue_changeset(issue, attrs, action="update")

        if not changeset.is_valid:
            logger.info("[support] issue update rejected id=%s errors=%s", issue.id, changeset.errors)
            return Result.invalid(changeset)

        # Nothing changed: no write, same as a no-op UPDATE
        if not changeset.changes:
            return Result.success(issue, changeset)

        if not self.issues.update(issue, changeset.changes):
            logger.warning("[support] issue update on missing row id=%s", issue.id)
            return Result.not_found()

        logger.info("[support] issue updated id=%s fields=%s", issue.id, sorted(changeset.changes))
        return Result.success(issue, changeset)

    def delete_issue(self, issue: Issue) -> Result[Issue]:
        """Delete issue together with its comments"""
        if not self.issues.delete(issue):
            logger.warning("[support] issue delete on missing row id=%s", issue.id)
            return Result.not_found()

        logger.info("[support] issue deleted id=%s", issue.id)
        return Result.success(issue)

    def change_issue(self, issue: Issue) -> Changeset:
        return issue_creator.issue_changeset(issue)
