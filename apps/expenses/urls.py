from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'expenses'

# Note: groups must be registered BEFORE empty prefix to avoid URL conflicts
router = DefaultRouter()
router.register(r'groups', views.ExpenseGroupViewSet, basename='expense-group')
router.register(r'', views.ExpenseViewSet, basename='expense')

urlpatterns = [
    # GET    /api/expenses/                - List expenses
    # POST   /api/expenses/                - Create expense
    # GET    /api/expenses/{id}/           - Get expense
    # PUT    /api/expenses/{id}/           - Replace expense
    # DELETE /api/expenses/{id}/           - Delete expense
    # GET    /api/expenses/latest/         - Dashboard summary
    # GET    /api/expenses/count/          - Number of expenses
    # DELETE /api/expenses/all/            - Delete all expenses

    # GET    /api/expenses/groups/         - List expense groups
    # POST   /api/expenses/groups/         - Create expense group
    # GET    /api/expenses/groups/{id}/    - Get expense group
    # PUT    /api/expenses/groups/{id}/    - Replace expense group
    # DELETE /api/expenses/groups/{id}/    - Delete expense group (and its expenses)
    path('', include(router.urls)),
]
