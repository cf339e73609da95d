from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.common.lookups import UUID_LOOKUP_REGEX, ensure_matching_id
from apps.common.pagination import PagedResponsePagination
from .models import Reminder
from .serializers import ReminderSerializer, ReminderInputSerializer, ReminderFilterSerializer
from .services import list_reminders, create_reminder, update_reminder, delete_reminder


class ReminderViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the caller's reminders.

    list: Paginated reminders (filter by type, active)
    create: Create a reminder
    retrieve: Get a specific reminder
    update: Replace a reminder
    destroy: Delete a reminder
    """

    serializer_class = ReminderSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = PagedResponsePagination
    lookup_value_regex = UUID_LOOKUP_REGEX
    http_method_names = ['get', 'post', 'put', 'delete', 'head', 'options']

    def get_queryset(self):
        if getattr(self, 'swagger_fake_view', False):
            return Reminder.objects.none()

        if self.action != 'list':
            return list_reminders(user=self.request.user)

        filter_serializer = ReminderFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        return list_reminders(
            user=self.request.user,
            type=params.get('type'),
            active=params.get('active'),
        )

    @extend_schema(request=ReminderInputSerializer, responses={201: ReminderSerializer})
    def create(self, request, *args, **kwargs):
        serializer = ReminderInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        reminder = create_reminder(
            user=request.user,
            type=serializer.validated_data['type'],
            reminder_day=serializer.validated_data['reminder_day'],
            active=serializer.validated_data['active'],
        )
        return Response(ReminderSerializer(reminder).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=ReminderInputSerializer, responses={200: ReminderSerializer})
    def update(self, request, *args, **kwargs):
        serializer = ReminderInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ensure_matching_id(serializer.validated_data, kwargs['pk'])

        reminder = update_reminder(
            user=request.user,
            reminder_id=kwargs['pk'],
            type=serializer.validated_data['type'],
            reminder_day=serializer.validated_data['reminder_day'],
            active=serializer.validated_data['active'],
        )
        return Response(ReminderSerializer(reminder).data)

    def destroy(self, request, *args, **kwargs):
        delete_reminder(user=request.user, reminder_id=kwargs['pk'])
        return Response(status=status.HTTP_204_NO_CONTENT)
