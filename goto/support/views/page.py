# ============================================
# support/views/page.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.reverse import reverse


@extend_schema(tags=["Page"], summary="API index")
@api_view(["GET"])
@permission_classes([AllowAny])
def index(request):
    return Response({
        "issues": reverse("support:issue-list-create", request=request),
        "schema": reverse("schema", request=request),
        "docs": reverse("swagger-ui", request=request),
    })
