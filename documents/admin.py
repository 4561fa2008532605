from django.contrib import admin
from .models import DocumentTemplate


@admin.register(DocumentTemplate)
class DocumentTemplateAdmin(admin.ModelAdmin):
    list_display = ('user', 'type', 'is_default', 'updated_at')
    list_filter = ('type', 'is_default')
