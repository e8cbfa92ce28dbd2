# ============================================
# support/serializers/issue.py
# ============================================
from rest_framework import serializers
from support.models import Issue


class IssueAttrsSerializer(serializers.Serializer):
    """
    Castable issue fields. Owner and id are not declared, so they can
    never be set from request attrs.
    """
    title = serializers.CharField(max_length=255, required=False, allow_blank=True, trim_whitespace=False)
    body = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)


class IssueOutputSerializer(serializers.ModelSerializer):
    class Meta:
        model = Issue
        fields = ['id', 'title', 'body', 'user_id', 'inserted_at', 'updated_at']
