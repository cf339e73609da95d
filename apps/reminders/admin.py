from django.contrib import admin
from .models import Reminder


@admin.register(Reminder)
class ReminderAdmin(admin.ModelAdmin):
    list_display = ['user', 'type', 'reminder_day', 'active', 'created_at']
    list_filter = ['type', 'reminder_day', 'active']
    search_fields = ['user__email', 'user__username']
    readonly_fields = ['id', 'created_at', 'updated_at']
    raw_id_fields = ['user']
    list_select_related = ['user']
    actions = ['pause_reminders', 'resume_reminders']

    @admin.action(description='Pause selected reminders')
    def pause_reminders(self, request, queryset):
        updated = queryset.update(active=False)
        self.message_user(request, f'{updated} reminder(s) paused.')

    @admin.action(description='Resume selected reminders')
    def resume_reminders(self, request, queryset):
        updated = queryset.update(active=True)
        self.message_user(request, f'{updated} reminder(s) resumed.')
