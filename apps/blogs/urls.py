from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'blogs'

router = DefaultRouter()
router.register(r'', views.BlogViewSet, basename='blog')

urlpatterns = [
    # GET    /api/blogs/          - List blogs (public)
    # POST   /api/blogs/          - Publish blog
    # GET    /api/blogs/{id}/     - Get blog (public)
    # PUT    /api/blogs/{id}/     - Replace blog (owner)
    # DELETE /api/blogs/{id}/     - Delete blog (owner)
    path('', include(router.urls)),
]
