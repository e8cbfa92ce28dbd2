# ============================================
# support/serializers/comment.py
# ============================================
from django.contrib.auth import get_user_model
from rest_framework import serializers
from support.models import Comment


class CommentAttrsSerializer(serializers.Serializer):
    body = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)


class AuthorSerializer(serializers.ModelSerializer):
    class Meta:
        model = get_user_model()
        fields = ['id', 'username']


class CommentOutputSerializer(serializers.ModelSerializer):
    user = AuthorSerializer(read_only=True)

    class Meta:
        model = Comment
        fields = ['id', 'body', 'issue_id', 'user', 'inserted_at', 'updated_at']
