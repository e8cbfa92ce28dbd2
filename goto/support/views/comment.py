# ============================================
# support/views/comment.py
# ============================================
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from support.serializers.changeset import ChangesetOutputSerializer
from support.serializers.comment import CommentAttrsSerializer, CommentOutputSerializer
from .utils import (
    extend_schema, extend_schema_view, OpenApiResponse, path_int, std_errors,
    StoreMixin, error_response, not_found, request_attrs,
)


@extend_schema_view(
    get=extend_schema(
        tags=["Comment"],
        summary="List comments of an issue, oldest first",
        parameters=[path_int("issue_id", "Issue ID")],
        responses={200: OpenApiResponse(CommentOutputSerializer(many=True)), **std_errors()},
    ),
    post=extend_schema(
        tags=["Comment"],
        summary="Comment on an issue as the current user",
        parameters=[path_int("issue_id", "Issue ID")],
        request=CommentAttrsSerializer,
        responses={201: OpenApiResponse(CommentOutputSerializer), **std_errors()},
    ),
)
class CommentListCreateAPIView(StoreMixin, APIView):
    """
    GET: List comments for an issue
    POST: Create a comment

    Path params:
    - issue_id: int

    Request body (POST):
    - body: string (required)
    """

    def get(self, request, issue_id):
        store = self.get_store()
        issue = store.get_issue(issue_id)

        if not issue:
            return not_found('Issue')

        comments = store.list_comments(issue)
        serializer = CommentOutputSerializer(comments, many=True)
        return Response(serializer.data)

    def post(self, request, issue_id):
        store = self.get_store()
        issue = store.get_issue(issue_id)

        if not issue:
            return not_found('Issue')

        result = store.create_comment(issue, request.user, request_attrs(request))

        if not result.ok:
            return error_response(result, 'Comment')

        output_serializer = CommentOutputSerializer(result.value)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)


@extend_schema_view(
    get=extend_schema(
        tags=["Comment"],
        summary="Get comment details",
        parameters=[path_int("comment_id", "Comment ID")],
        responses={200: OpenApiResponse(CommentOutputSerializer), **std_errors()},
    ),
    put=extend_schema(
        tags=["Comment"],
        summary="Update comment body",
        parameters=[path_int("comment_id", "Comment ID")],
        request=CommentAttrsSerializer,
        responses={200: OpenApiResponse(CommentOutputSerializer), **std_errors()},
    ),
    patch=extend_schema(
        tags=["Comment"],
        summary="Update comment body",
        parameters=[path_int("comment_id", "Comment ID")],
        request=CommentAttrsSerializer,
        responses={200: OpenApiResponse(CommentOutputSerializer), **std_errors()},
    ),
    delete=extend_schema(
        tags=["Comment"],
        summary="Delete comment",
        parameters=[path_int("comment_id", "Comment ID")],
        responses={204: OpenApiResponse(None, description="Deleted"), **std_errors()},
    ),
)
class CommentDetailAPIView(StoreMixin, APIView):
    """
    GET: Retrieve comment
    PUT/PATCH: Update comment; both are partial, omitted fields keep their value
    DELETE: Delete comment

    Path params:
    - comment_id: int
    """

    def get(self, request, comment_id):
        comment = self.get_store().get_comment(comment_id)

        if not comment:
            return not_found('Comment')

        return Response(CommentOutputSerializer(comment).data)

    def put(self, request, comment_id):
        store = self.get_store()
        comment = store.get_comment(comment_id)

        if not comment:
            return not_found('Comment')

        result = store.update_comment(comment, request_attrs(request))

        if not result.ok:
            return error_response(result, 'Comment')

        return Response(CommentOutputSerializer(result.value).data)

    def patch(self, request, comment_id):
        return self.put(request, comment_id)

    def delete(self, request, comment_id):
        store = self.get_store()
        comment = store.get_comment(comment_id)

        if not comment:
            return not_found('Comment')

        result = store.delete_comment(comment)

        if not result.ok:
            return error_response(result, 'Comment')

        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    tags=["Comment"],
    summary="Changeset preview for a comment form",
    parameters=[path_int("comment_id", "Comment ID")],
    responses={200: OpenApiResponse(ChangesetOutputSerializer), **std_errors()},
)
class CommentChangesetAPIView(StoreMixin, APIView):

    def get(self, request, comment_id):
        store = self.get_store()
        comment = store.get_comment(comment_id)

        if not comment:
            return not_found('Comment')

        changeset = store.change_comment(comment)
        return Response(ChangesetOutputSerializer(changeset).data)
