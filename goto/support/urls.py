# ============================================
# support/urls.py
# ============================================
from django.urls import path
from support.views.issue import (
    IssueListCreateAPIView,
    IssueDetailAPIView,
    IssueChangesetAPIView,
)
from support.views.comment import (
    CommentListCreateAPIView,
    CommentDetailAPIView,
    CommentChangesetAPIView,
)

app_name = 'support'

urlpatterns = [
    # Issues
    path('issues/', IssueListCreateAPIView.as_view(), name='issue-list-create'),
    path('issues/<int:issue_id>/', IssueDetailAPIView.as_view(), name='issue-detail'),
    path('issues/<int:issue_id>/changeset/', IssueChangesetAPIView.as_view(), name='issue-changeset'),

    # Comments
    path('issues/<int:issue_id>/comments/', CommentListCreateAPIView.as_view(), name='comment-list-create'),
    path('comments/<int:comment_id>/', CommentDetailAPIView.as_view(), name='comment-detail'),
    path('comments/<int:comment_id>/changeset/', CommentChangesetAPIView.as_view(), name='comment-changeset'),
]
