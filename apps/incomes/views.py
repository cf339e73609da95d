from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.common.lookups import UUID_LOOKUP_REGEX, ensure_matching_id
from apps.common.pagination import PagedResponsePagination
from .models import Income
from .serializers import (
    IncomeSerializer,
    IncomeInputSerializer,
    IncomeFilterSerializer,
    IncomeGroupSerializer,
    IncomeGroupInputSerializer,
    IncomeGroupFilterSerializer,
    LatestIncomesSerializer,
    CountSerializer,
)
from .services import (
    list_incomes,
    create_income,
    update_income,
    delete_income,
    delete_all_incomes,
    count_incomes,
    get_latest_incomes,
    list_income_groups,
    create_income_group,
    update_income_group,
    delete_income_group,
)


class IncomeViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the caller's incomes.

    list: Paginated incomes (filter by description, amount range, group)
    create: Create an income
    retrieve: Get a specific income
    update: Replace an income
    destroy: Delete an income
    """

    serializer_class = IncomeSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = PagedResponsePagination
    lookup_value_regex = UUID_LOOKUP_REGEX
    http_method_names = ['get', 'post', 'put', 'delete', 'head', 'options']

    def get_queryset(self):
        """Scope to the caller; list requests also apply validated filters."""
        if getattr(self, 'swagger_fake_view', False):
            return Income.objects.none()

        if self.action != 'list':
            return list_incomes(user=self.request.user)

        filter_serializer = IncomeFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        return list_incomes(
            user=self.request.user,
            description=params.get('description'),
            min_amount=params.get('minAmount'),
            max_amount=params.get('maxAmount'),
            income_group_id=params.get('incomeGroupId'),
        )

    @extend_schema(request=IncomeInputSerializer, responses={201: IncomeSerializer})
    def create(self, request, *args, **kwargs):
        serializer = IncomeInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        income = create_income(
            user=request.user,
            description=serializer.validated_data['description'],
            amount=serializer.validated_data['amount'],
            income_group_id=serializer.validated_data['income_group'],
        )
        return Response(IncomeSerializer(income).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=IncomeInputSerializer, responses={200: IncomeSerializer})
    def update(self, request, *args, **kwargs):
        serializer = IncomeInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ensure_matching_id(serializer.validated_data, kwargs['pk'])

        income = update_income(
            user=request.user,
            income_id=kwargs['pk'],
            description=serializer.validated_data['description'],
            amount=serializer.validated_data['amount'],
            income_group_id=serializer.validated_data['income_group'],
        )
        return Response(IncomeSerializer(income).data)

    def destroy(self, request, *args, **kwargs):
        delete_income(user=request.user, income_id=kwargs['pk'])
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: LatestIncomesSerializer})
    @action(detail=False, methods=['get'])
    def latest(self, request):
        """
        Highest income of the last week and the five newest incomes.

        GET /api/incomes/latest/
        """
        summary = get_latest_incomes(user=request.user)
        return Response(LatestIncomesSerializer(summary).data)

    @extend_schema(responses={200: CountSerializer})
    @action(detail=False, methods=['get'])
    def count(self, request):
        """
        GET /api/incomes/count/
        """
        return Response({'count': count_incomes(user=request.user)})

    @extend_schema(request=None, responses={204: None})
    @action(detail=False, methods=['delete'], url_path='all')
    def delete_all(self, request):
        """
        Delete all of the caller's incomes.

        DELETE /api/incomes/all/
        """
        delete_all_incomes(user=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


class IncomeGroupViewSet(viewsets.ModelViewSet):
    """
    ViewSet for income groups, shared by all users.

    Deleting a group deletes its incomes.
    """

    serializer_class = IncomeGroupSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = PagedResponsePagination
    lookup_value_regex = UUID_LOOKUP_REGEX
    http_method_names = ['get', 'post', 'put', 'delete', 'head', 'options']

    def get_queryset(self):
        if self.action != 'list':
            return list_income_groups()

        filter_serializer = IncomeGroupFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return list_income_groups(name=filter_serializer.validated_data.get('name'))

    @extend_schema(request=IncomeGroupInputSerializer, responses={201: IncomeGroupSerializer})
    def create(self, request, *args, **kwargs):
        serializer = IncomeGroupInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        group = create_income_group(
            name=serializer.validated_data['name'],
            description=serializer.validated_data['description'],
        )
        return Response(IncomeGroupSerializer(group).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=IncomeGroupInputSerializer, responses={200: IncomeGroupSerializer})
    def update(self, request, *args, **kwargs):
        serializer = IncomeGroupInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ensure_matching_id(serializer.validated_data, kwargs['pk'])

        group = update_income_group(
            group_id=kwargs['pk'],
            name=serializer.validated_data['name'],
            description=serializer.validated_data['description'],
        )
        return Response(IncomeGroupSerializer(group).data)

    def destroy(self, request, *args, **kwargs):
        delete_income_group(group_id=kwargs['pk'])
        return Response(status=status.HTTP_204_NO_CONTENT)
