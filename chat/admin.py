from django.contrib import admin
from .models import Conversation, Message


def _preview(text, length=60):
    return text[:length] + '...' if len(text) > length else text


class MessageInline(admin.TabularInline):
    model = Message
    extra = 0
    fields = ('role', 'content', 'created_at')
    readonly_fields = ('created_at',)


@admin.register(Conversation)
class ConversationAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'user', 'project', 'message_count', 'updated_at')
    list_filter = ('project',)
    search_fields = ('title', 'user__email', 'project__name')
    raw_id_fields = ('user', 'project')
    inlines = [MessageInline]

    @admin.display(description='Messages')
    def message_count(self, obj):
        return obj.messages.count()


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ('id', 'role', 'content_preview', 'conversation', 'created_at')
    list_filter = ('role',)
    search_fields = ('content',)
    raw_id_fields = ('conversation',)

    @admin.display(description='Content')
    def content_preview(self, obj):
        return _preview(obj.content)
