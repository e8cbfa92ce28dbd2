import pytest
from datetime import timedelta
from django.utils import timezone
from support.models import Comment
from support.services.results import ErrorCode


def _set_inserted_at(comment, value):
    Comment.objects.filter(pk=comment.pk).update(inserted_at=value)


@pytest.mark.django_db
def test_list_comments_ordered_by_insertion_time(store, issue, user):
    c1 = store.create_comment(issue, user, {"body": "first"}).value
    c2 = store.create_comment(issue, user, {"body": "second"}).value
    c3 = store.create_comment(issue, user, {"body": "third"}).value

    now = timezone.now()
    _set_inserted_at(c1, now - timedelta(minutes=2))
    _set_inserted_at(c2, now - timedelta(minutes=1))
    _set_inserted_at(c3, now - timedelta(minutes=3))

    assert [c.id for c in store.list_comments(issue)] == [c3.id, c1.id, c2.id]


@pytest.mark.django_db
def test_list_comments_ties_broken_by_id(store, issue, user):
    comments = [store.create_comment(issue, user, {"body": f"#{n}"}).value for n in range(3)]
    same = timezone.now()
    Comment.objects.filter(issue=issue).update(inserted_at=same)

    assert [c.id for c in store.list_comments(issue)] == [c.id for c in comments]


@pytest.mark.django_db
def test_list_comments_scoped_to_issue(store, issue, user):
    other_issue = store.create_issue(user, {"title": "Other", "body": "x"}).value
    mine = store.create_comment(issue, user, {"body": "mine"}).value
    store.create_comment(other_issue, user, {"body": "not mine"})

    assert [c.id for c in store.list_comments(issue)] == [mine.id]


@pytest.mark.django_db
def test_list_comments_loads_authors_in_one_query(store, issue, user, other_user, django_assert_num_queries):
    store.create_comment(issue, user, {"body": "a"})
    store.create_comment(issue, other_user, {"body": "b"})

    with django_assert_num_queries(1):
        authors = [c.user.username for c in store.list_comments(issue)]

    assert authors == ["tester", "someone"]


@pytest.mark.django_db
def test_create_comment(store, issue, user):
    result = store.create_comment(issue, user, {"body": "hi"})

    assert result.ok
    comment = result.value
    assert comment.issue_id == issue.id
    assert comment.user_id == user.id
    assert Comment.objects.filter(issue=issue).count() == 1


@pytest.mark.django_db
def test_create_comment_attaches_given_user_without_query(store, issue, user, django_assert_num_queries):
    comment = store.create_comment(issue, user, {"body": "hi"}).value

    with django_assert_num_queries(0):
        assert comment.user is user


@pytest.mark.django_db
@pytest.mark.parametrize("attrs", [{}, {"body": ""}, {"body": "   "}, None])
def test_create_comment_requires_body(store, issue, user, attrs):
    result = store.create_comment(issue, user, attrs)

    assert result.error is ErrorCode.VALIDATION_FAILED
    assert "body" in result.errors
    assert Comment.objects.count() == 0


@pytest.mark.django_db
def test_create_comment_ignores_supplied_author(store, issue, user, other_user):
    result = store.create_comment(issue, user, {"body": "hi", "user_id": other_user.id})

    assert result.ok
    assert Comment.objects.get(pk=result.value.pk).user_id == user.id


@pytest.mark.django_db
def test_get_comment(store, comment):
    assert store.get_comment(comment.id) == comment
    assert store.get_comment(99999) is None


@pytest.mark.django_db
def test_update_comment(store, comment):
    result = store.update_comment(comment, {"body": "Cannot reproduce anymore"})

    assert result.ok
    comment.refresh_from_db()
    assert comment.body == "Cannot reproduce anymore"


@pytest.mark.django_db
def test_update_comment_rejects_blank_body(store, comment):
    result = store.update_comment(comment, {"body": ""})

    assert result.error is ErrorCode.VALIDATION_FAILED
    assert result.errors == {"body": ["This field is required."]}
    comment.refresh_from_db()
    assert comment.body == "Can reproduce"


@pytest.mark.django_db
def test_update_comment_on_deleted_row_is_not_found(store, comment):
    Comment.objects.filter(pk=comment.pk).delete()

    result = store.update_comment(comment, {"body": "late edit"})

    assert result.error is ErrorCode.NOT_FOUND
    assert not Comment.objects.exists()


@pytest.mark.django_db
def test_delete_comment(store, comment):
    assert store.delete_comment(comment).ok
    assert store.get_comment(comment.id) is None
    assert store.delete_comment(comment).error is ErrorCode.NOT_FOUND


@pytest.mark.django_db
def test_change_comment_is_pure(store, comment, django_assert_num_queries):
    with django_assert_num_queries(0):
        changeset = store.change_comment(comment)

    assert changeset.is_valid
    assert changeset.changes == {}
    assert changeset.data == {"body": "Can reproduce"}


@pytest.mark.django_db
def test_create_comment_keeps_whitespace_as_given(store, issue, user):
    created = store.create_comment(issue, user, {"body": "    code block\n"}).value

    assert store.get_comment(created.id).body == "    code block\n"


@pytest.mark.django_db
def test_update_comment_keeps_whitespace_as_given(store, comment):
    store.update_comment(comment, {"body": "  Crash  "})

    comment.refresh_from_db()
    assert comment.body == "  Crash  "


@pytest.mark.django_db
def test_update_comment_on_deleted_row_leaves_instance_untouched(store, comment):
    Comment.objects.filter(pk=comment.pk).delete()

    result = store.update_comment(comment, {"body": "late edit"})

    assert result.error is ErrorCode.NOT_FOUND
    assert comment.body == "Can reproduce"
