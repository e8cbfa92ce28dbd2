# ============================================
# support/views/issue.py
# ============================================
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from support.serializers.changeset import ChangesetOutputSerializer
from support.serializers.issue import IssueAttrsSerializer, IssueOutputSerializer
from .utils import (
    extend_schema, extend_schema_view, OpenApiResponse, path_int, std_errors,
    StoreMixin, error_response, not_found, request_attrs,
)


@extend_schema_view(
    get=extend_schema(
        tags=["Issue"],
        summary="List all issues",
        responses=OpenApiResponse(IssueOutputSerializer(many=True)),
    ),
    post=extend_schema(
        tags=["Issue"],
        summary="Create an issue owned by the current user",
        request=IssueAttrsSerializer,
        responses={201: OpenApiResponse(IssueOutputSerializer), **std_errors()},
    ),
)
class IssueListCreateAPIView(StoreMixin, APIView):
    """
    GET: List issues
    POST: Create a new issue

    Request body (POST):
    - title: string (required)
    - body: string (required)
    """

    def get(self, request):
        issues = self.get_store().list_issues()
        serializer = IssueOutputSerializer(issues, many=True)
        return Response(serializer.data)

    def post(self, request):
        result = self.get_store().create_issue(request.user, request_attrs(request))

        if not result.ok:
            return error_response(result, 'Issue')

        output_serializer = IssueOutputSerializer(result.value)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)


@extend_schema_view(
    get=extend_schema(
        tags=["Issue"],
        summary="Get issue details",
        parameters=[path_int("issue_id", "Issue ID")],
        responses={200: OpenApiResponse(IssueOutputSerializer), **std_errors()},
    ),
    put=extend_schema(
        tags=["Issue"],
        summary="Update issue (partial allowed)",
        parameters=[path_int("issue_id", "Issue ID")],
        request=IssueAttrsSerializer,
        responses={200: OpenApiResponse(IssueOutputSerializer), **std_errors()},
    ),
    patch=extend_schema(
        tags=["Issue"],
        summary="Update issue (partial allowed)",
        parameters=[path_int("issue_id", "Issue ID")],
        request=IssueAttrsSerializer,
        responses={200: OpenApiResponse(IssueOutputSerializer), **std_errors()},
    ),
    delete=extend_schema(
        tags=["Issue"],
        summary="Delete issue and its comments",
        parameters=[path_int("issue_id", "Issue ID")],
        responses={204: OpenApiResponse(None, description="Deleted"), **std_errors()},
    ),
)
class IssueDetailAPIView(StoreMixin, APIView):
    """
    GET: Retrieve issue details
    PUT/PATCH: Update issue; both are partial, omitted fields keep their value
    DELETE: Delete issue

    Path params:
    - issue_id: int
    """

    def get(self, request, issue_id):
        issue = self.get_store().get_issue(issue_id)

        if not issue:
            return not_found('Issue')

        return Response(IssueOutputSerializer(issue).data)

    def put(self, request, issue_id):
        store = self.get_store()
        issue = store.get_issue(issue_id)

        if not issue:
            return not_found('Issue')

        result = store.update_issue(issue, request_attrs(request))

        if not result.ok:
            return error_response(result, 'Issue')

        return Response(IssueOutputSerializer(result.value).data)

    def patch(self, request, issue_id):
        return self.put(request, issue_id)

    def delete(self, request, issue_id):
        store = self.get_store()
        issue = store.get_issue(issue_id)

        if not issue:
            return not_found('Issue')

        result = store.delete_issue(issue)

        if not result.ok:
            return error_response(result, 'Issue')

        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    tags=["Issue"],
    summary="Changeset preview for an issue form",
    parameters=[path_int("issue_id", "Issue ID")],
    responses={200: OpenApiResponse(ChangesetOutputSerializer), **std_errors()},
)
class IssueChangesetAPIView(StoreMixin, APIView):

    def get(self, request, issue_id):
        store = self.get_store()
        issue = store.get_issue(issue_id)

        if not issue:
            return not_found('Issue')

        changeset = store.change_issue(issue)
        return Response(ChangesetOutputSerializer(changeset).data)
