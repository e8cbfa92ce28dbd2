# ============================================
# support/models/comment.py
# ============================================
from django.conf import settings
from django.db import models


class Comment(models.Model):
    issue = models.ForeignKey(
        'Issue',
        on_delete=models.CASCADE,
        related_name='comments'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='comments'
    )
    body = models.TextField()
    inserted_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'comments'
        ordering = ['inserted_at', 'id']
        indexes = [
            models.Index(fields=['issue', 'inserted_at'], name='comments_issue_inserted_idx'),
        ]

    def __str__(self):
        return f"Comment on #{self.issue_id}"
