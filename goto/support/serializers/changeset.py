# ============================================
# support/serializers/changeset.py
# ============================================
from rest_framework import serializers


class ChangesetOutputSerializer(serializers.Serializer):
    """Read-only view of a Changeset, used for form scaffolding."""
    valid = serializers.BooleanField(source='is_valid')
    changes = serializers.DictField()
    errors = serializers.DictField(child=serializers.ListField(child=serializers.CharField()))
    data = serializers.DictField()
