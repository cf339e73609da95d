from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'reminders'

router = DefaultRouter()
router.register(r'', views.ReminderViewSet, basename='reminder')

urlpatterns = [
    # GET    /api/reminders/          - List reminders
    # POST   /api/reminders/          - Create reminder
    # GET    /api/reminders/{id}/     - Get reminder
    # PUT    /api/reminders/{id}/     - Replace reminder
    # DELETE /api/reminders/{id}/     - Delete reminder
    path('', include(router.urls)),
]
