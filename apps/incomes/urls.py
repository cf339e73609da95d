from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'incomes'

# Note: groups must be registered BEFORE empty prefix to avoid URL conflicts
router = DefaultRouter()
router.register(r'groups', views.IncomeGroupViewSet, basename='income-group')
router.register(r'', views.IncomeViewSet, basename='income')

urlpatterns = [
    # GET    /api/incomes/                - List incomes
    # POST   /api/incomes/                - Create income
    # GET    /api/incomes/{id}/           - Get income
    # PUT    /api/incomes/{id}/           - Replace income
    # DELETE /api/incomes/{id}/           - Delete income
    # GET    /api/incomes/latest/         - Dashboard summary
    # GET    /api/incomes/count/          - Number of incomes
    # DELETE /api/incomes/all/            - Delete all incomes

    # GET    /api/incomes/groups/         - List income groups
    # POST   /api/incomes/groups/         - Create income group
    # GET    /api/incomes/groups/{id}/    - Get income group
    # PUT    /api/incomes/groups/{id}/    - Replace income group
    # DELETE /api/incomes/groups/{id}/    - Delete income group (and its incomes)
    path('', include(router.urls)),
]
