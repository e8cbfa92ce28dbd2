# ============================================
# support/models/issue.py
# ============================================
from django.conf import settings
from django.db import models


class Issue(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='issues'
    )
    title = models.CharField(max_length=255)
    body = models.TextField()
    inserted_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'issues'

    def __str__(self):
        return f"#{self.pk} - {self.title}"
