from django.contrib import admin
from .models import Issue, Comment


class CommentInline(admin.TabularInline):
    model = Comment
    extra = 0
    fields = ("user", "body", "inserted_at")
    readonly_fields = ("inserted_at",)


@admin.register(Issue)
class IssueAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "user", "inserted_at", "updated_at")
    search_fields = ("title", "body")
    inlines = [CommentInline]


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ("id", "issue", "user", "inserted_at")
    list_select_related = ("issue", "user")
    search_fields = ("body",)
