# ============================================
# support/models/__init__.py
# ============================================
from .issue import Issue
from .comment import Comment

__all__ = [
    'Issue',
    'Comment',
]
