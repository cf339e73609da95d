from django.contrib import admin
from django.db.models import Count
from .models import Income, IncomeGroup


class IncomeInline(admin.TabularInline):
    model = Income
    extra = 0
    fields = ['description', 'amount', 'user', 'created_at']
    readonly_fields = ['created_at']
    raw_id_fields = ['user']


@admin.register(IncomeGroup)
class IncomeGroupAdmin(admin.ModelAdmin):
    list_display = ['name', 'description', 'income_count', 'created_at']
    search_fields = ['name', 'description']
    readonly_fields = ['id', 'created_at', 'updated_at']
    inlines = [IncomeInline]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_income_count=Count('incomes'))

    def income_count(self, obj):
        return obj._income_count
    income_count.short_description = 'Incomes'
    income_count.admin_order_field = '_income_count'


@admin.register(Income)
class IncomeAdmin(admin.ModelAdmin):
    list_display = ['description', 'amount', 'income_group', 'user', 'created_at']
    list_filter = ['income_group', 'created_at']
    search_fields = ['description', 'user__email', 'user__username']
    readonly_fields = ['id', 'created_at', 'updated_at']
    raw_id_fields = ['user']
    list_select_related = ['income_group', 'user']
    date_hierarchy = 'created_at'
