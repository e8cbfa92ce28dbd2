import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient
from support.models import Issue, Comment
from support.store import IssueTrackingStore

User = get_user_model()

@pytest.fixture
def user(db):
    return User.objects.create_user(username="tester", password="pass")

@pytest.fixture
def other_user(db):
    return User.objects.create_user(username="someone", password="pass")

@pytest.fixture
def store():
    return IssueTrackingStore()

@pytest.fixture
def issue(db, user):
    return Issue.objects.create(user=user, title="Login fails", body="500 on submit")

@pytest.fixture
def comment(db, issue, other_user):
    return Comment.objects.create(issue=issue, user=other_user, body="Can reproduce")

@pytest.fixture
def api_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client
