# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import User, AccountType


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Admin interface for tracker users.

    - User listing with account type badge
    - Filtering by status and account type
    - Search by email and username
    - Bulk promotion/demotion of administrators
    """

    list_display = [
        'email',
        'username',
        'account_type_badge',
        'is_active',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'account_type',
        'is_active',
        'is_staff',
        'created_at',
    ]

    search_fields = [
        'email',
        'username',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    # Remove username-as-login references from BaseUserAdmin
    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'username', 'password')
        }),
        ('Permissions', {
            'fields': ('account_type', 'is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('email', 'username', 'password1', 'password2'),
        }),
        ('Permissions', {
            'fields': ('account_type', 'is_active', 'is_staff', 'is_superuser'),
        }),
    )

    readonly_fields = [
        'created_at',
        'last_login',
    ]

    filter_horizontal = ['groups', 'user_permissions']

    def account_type_badge(self, obj):
        """Display account type as colored badge."""
        if obj.account_type == AccountType.ADMINISTRATOR:
            return format_html(
                '<span style="background: #2563EB; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">Administrator</span>'
            )
        return format_html(
            '<span style="background: #ccc; color: #666; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">User</span>'
        )
    account_type_badge.short_description = 'Account type'
    account_type_badge.admin_order_field = 'account_type'

    actions = [
        'promote_to_administrator',
        'demote_to_user',
    ]

    @admin.action(description='Make selected users administrators')
    def promote_to_administrator(self, request, queryset):
        count = queryset.update(account_type=AccountType.ADMINISTRATOR)
        self.message_user(request, f'Promoted {count} user(s).')

    @admin.action(description='Make selected users regular users')
    def demote_to_user(self, request, queryset):
        """Demote selected users (excludes superusers)."""
        safe_queryset = queryset.filter(is_superuser=False)
        count = safe_queryset.update(account_type=AccountType.USER)
        skipped = queryset.count() - count
        msg = f'Demoted {count} user(s).'
        if skipped:
            msg += f' Skipped {skipped} superuser(s).'
        self.message_user(request, msg)
