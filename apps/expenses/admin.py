from django.contrib import admin
from django.db.models import Count
from .models import Expense, ExpenseGroup


class ExpenseInline(admin.TabularInline):
    model = Expense
    extra = 0
    fields = ['description', 'amount', 'user', 'created_at']
    readonly_fields = ['created_at']
    raw_id_fields = ['user']


@admin.register(ExpenseGroup)
class ExpenseGroupAdmin(admin.ModelAdmin):
    list_display = ['name', 'description', 'expense_count', 'created_at']
    search_fields = ['name', 'description']
    readonly_fields = ['id', 'created_at', 'updated_at']
    inlines = [ExpenseInline]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_expense_count=Count('expenses'))

    def expense_count(self, obj):
        return obj._expense_count
    expense_count.short_description = 'Expenses'
    expense_count.admin_order_field = '_expense_count'


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ['description', 'amount', 'expense_group', 'user', 'created_at']
    list_filter = ['expense_group', 'created_at']
    search_fields = ['description', 'user__email', 'user__username']
    readonly_fields = ['id', 'created_at', 'updated_at']
    raw_id_fields = ['user']
    list_select_related = ['expense_group', 'user']
    date_hierarchy = 'created_at'
