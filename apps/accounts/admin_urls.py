from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'user-admin'

router = DefaultRouter()
router.register(r'', views.UserViewSet, basename='user')

urlpatterns = [
    # GET    /api/users/          - List users (administrators)
    # GET    /api/users/count/    - Number of users
    # GET    /api/users/{id}/     - Get user
    # DELETE /api/users/{id}/     - Delete user
    path('', include(router.urls)),
]
