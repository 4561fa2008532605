from django.contrib import admin
from .models import Project

@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ('name', 'owner', 'type', 'status', 'priority', 'quarter', 'display_order', 'updated_at')
    list_editable = ('display_order',)
    list_filter = ('status', 'type', 'priority', 'created_at')
    search_fields = ('name', 'description', 'owner__email')
    date_hierarchy = 'created_at'
