from django.contrib import admin
from .models import Blog


@admin.register(Blog)
class BlogAdmin(admin.ModelAdmin):
    list_display = ['description', 'author', 'user', 'created_at']
    search_fields = ['description', 'author', 'text', 'user__email']
    readonly_fields = ['id', 'created_at', 'updated_at']
    raw_id_fields = ['user']
    list_select_related = ['user']
    date_hierarchy = 'created_at'
