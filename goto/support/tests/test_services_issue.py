import pytest
from support.models import Comment, Issue
from support.repositories import IssueRepository
from support.services.results import ErrorCode
from support.store import IssueTrackingStore


@pytest.mark.django_db
def test_create_issue_persists_one_issue_owned_by_user(store, user):
    result = store.create_issue(user, {"title": "Crash", "body": "Stack trace attached"})

    assert result.ok
    assert Issue.objects.count() == 1
    issue = Issue.objects.get()
    assert issue.user_id == user.id
    assert issue.title == "Crash"
    assert result.value.id == issue.id
    assert result.changeset.action == "insert"


@pytest.mark.django_db
def test_create_issue_missing_fields_persists_nothing(store, user):
    result = store.create_issue(user, {"title": ""})

    assert result.error is ErrorCode.VALIDATION_FAILED
    assert set(result.errors) == {"title", "body"}
    assert result.changeset.action == "insert"
    assert Issue.objects.count() == 0


@pytest.mark.django_db
def test_create_issue_owner_cannot_come_from_attrs(store, user, other_user):
    result = store.create_issue(user, {"title": "T", "body": "B", "user_id": other_user.id})

    assert result.ok
    assert Issue.objects.get().user_id == user.id


@pytest.mark.django_db
def test_get_issue_round_trip(store, user):
    assert store.get_issue(12345) is None

    created = store.create_issue(user, {"title": "Round", "body": "Trip"}).value
    fetched = store.get_issue(created.id)

    assert fetched == created
    for field in ("id", "title", "body", "user_id", "inserted_at", "updated_at"):
        assert getattr(fetched, field) == getattr(created, field)


@pytest.mark.django_db
def test_list_issues(store, user):
    assert store.list_issues() == []
    a = store.create_issue(user, {"title": "A", "body": "a"}).value
    b = store.create_issue(user, {"title": "B", "body": "b"}).value

    assert [i.id for i in store.list_issues()] == [a.id, b.id]


@pytest.mark.django_db
def test_update_issue(store, issue):
    result = store.update_issue(issue, {"title": "Login fails on Safari"})

    assert result.ok
    issue.refresh_from_db()
    assert issue.title == "Login fails on Safari"
    assert issue.body == "500 on submit"


@pytest.mark.django_db
def test_update_issue_rejected_keeps_row_and_exposes_changeset(store, issue):
    result = store.update_issue(issue, {"title": "", "body": "new body"})

    assert result.error is ErrorCode.VALIDATION_FAILED
    assert result.errors == {"title": ["This field is required."]}
    assert result.changeset.data == {"title": "", "body": "new body"}
    assert result.changeset.action == "update"

    issue.refresh_from_db()
    assert issue.title == "Login fails"
    assert issue.body == "500 on submit"


@pytest.mark.django_db
def test_update_issue_owner_is_immutable(store, issue, other_user, user):
    result = store.update_issue(issue, {"user_id": other_user.id, "user": other_user.id})

    assert result.ok
    issue.refresh_from_db()
    assert issue.user_id == user.id


@pytest.mark.django_db
def test_update_issue_without_changes_does_not_write(store, issue, django_assert_num_queries):
    with django_assert_num_queries(0):
        result = store.update_issue(issue, {"title": issue.title})
    assert result.ok
    assert result.changeset.changes == {}


@pytest.mark.django_db
def test_update_issue_on_deleted_row_is_not_found(store, issue):
    Issue.objects.filter(pk=issue.pk).delete()

    result = store.update_issue(issue, {"title": "ghost"})

    assert result.error is ErrorCode.NOT_FOUND
    assert Issue.objects.count() == 0


@pytest.mark.django_db
def test_delete_issue(store, issue):
    result = store.delete_issue(issue)

    assert result.ok
    assert result.value.id == issue.id
    assert store.get_issue(issue.id) is None

    again = store.delete_issue(issue)
    assert again.error is ErrorCode.NOT_FOUND


@pytest.mark.django_db
def test_delete_issue_cascades_to_comments(store, issue, comment):
    store.delete_issue(issue)
    assert not Comment.objects.filter(pk=comment.pk).exists()


@pytest.mark.django_db
def test_change_issue_is_pure(store, issue, django_assert_num_queries):
    with django_assert_num_queries(0):
        changeset = store.change_issue(issue)

    assert changeset.changes == {}
    assert changeset.is_valid
    assert changeset.action is None
    assert changeset.data == {"title": "Login fails", "body": "500 on submit"}


def test_change_issue_on_blank_issue_needs_no_database():
    changeset = IssueTrackingStore().change_issue(Issue())
    assert not changeset.is_valid
    assert set(changeset.errors) == {"title", "body"}


class RecordingIssueRepository(IssueRepository):
    def __init__(self):
        super().__init__()
        self.inserted = []

    def insert(self, obj):
        self.inserted.append(obj)
        return super().insert(obj)


@pytest.mark.django_db
def test_store_writes_through_injected_repository(user):
    repo = RecordingIssueRepository()
    store = IssueTrackingStore(issues=repo)

    ok = store.create_issue(user, {"title": "T", "body": "B"})
    store.create_issue(user, {"title": "T"})

    assert repo.inserted == [ok.value]


@pytest.mark.django_db
def test_create_issue_keeps_whitespace_as_given(store, user):
    created = store.create_issue(user, {"title": "  Crash  ", "body": "trace:\n    line 1\n"}).value

    fetched = store.get_issue(created.id)
    assert fetched.title == "  Crash  "
    assert fetched.body == "trace:\n    line 1\n"


@pytest.mark.django_db
def test_update_issue_on_deleted_row_leaves_instance_untouched(store, issue):
    Issue.objects.filter(pk=issue.pk).delete()
    updated_at = issue.updated_at

    result = store.update_issue(issue, {"title": "ghost"})

    assert result.error is ErrorCode.NOT_FOUND
    assert issue.title == "Login fails"
    assert issue.updated_at == updated_at
