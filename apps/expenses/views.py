from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.common.lookups import UUID_LOOKUP_REGEX, ensure_matching_id
from apps.common.pagination import PagedResponsePagination
from .models import Expense
from .serializers import (
    ExpenseSerializer,
    ExpenseInputSerializer,
    ExpenseFilterSerializer,
    ExpenseGroupSerializer,
    ExpenseGroupInputSerializer,
    ExpenseGroupFilterSerializer,
    LatestExpensesSerializer,
    CountSerializer,
)
from .services import (
    list_expenses,
    create_expense,
    update_expense,
    delete_expense,
    delete_all_expenses,
    count_expenses,
    get_latest_expenses,
    list_expense_groups,
    create_expense_group,
    update_expense_group,
    delete_expense_group,
)


class ExpenseViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the caller's expenses.

    Same contract as the income endpoints, except that expense_group may be
    omitted or null on create and update.
    """

    serializer_class = ExpenseSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = PagedResponsePagination
    lookup_value_regex = UUID_LOOKUP_REGEX
    http_method_names = ['get', 'post', 'put', 'delete', 'head', 'options']

    def get_queryset(self):
        """Scope to the caller; list requests also apply validated filters."""
        if getattr(self, 'swagger_fake_view', False):
            return Expense.objects.none()

        if self.action != 'list':
            return list_expenses(user=self.request.user)

        filter_serializer = ExpenseFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        return list_expenses(
            user=self.request.user,
            description=params.get('description'),
            min_amount=params.get('minAmount'),
            max_amount=params.get('maxAmount'),
            expense_group_id=params.get('expenseGroupId'),
        )

    @extend_schema(request=ExpenseInputSerializer, responses={201: ExpenseSerializer})
    def create(self, request, *args, **kwargs):
        serializer = ExpenseInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        expense = create_expense(
            user=request.user,
            description=serializer.validated_data['description'],
            amount=serializer.validated_data['amount'],
            expense_group_id=serializer.validated_data.get('expense_group'),
        )
        return Response(ExpenseSerializer(expense).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=ExpenseInputSerializer, responses={200: ExpenseSerializer})
    def update(self, request, *args, **kwargs):
        serializer = ExpenseInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ensure_matching_id(serializer.validated_data, kwargs['pk'])

        expense = update_expense(
            user=request.user,
            expense_id=kwargs['pk'],
            description=serializer.validated_data['description'],
            amount=serializer.validated_data['amount'],
            expense_group_id=serializer.validated_data.get('expense_group'),
        )
        return Response(ExpenseSerializer(expense).data)

    def destroy(self, request, *args, **kwargs):
        delete_expense(user=request.user, expense_id=kwargs['pk'])
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: LatestExpensesSerializer})
    @action(detail=False, methods=['get'])
    def latest(self, request):
        """
        Largest expense of the last week and the five newest expenses.

        GET /api/expenses/latest/
        """
        summary = get_latest_expenses(user=request.user)
        return Response(LatestExpensesSerializer(summary).data)

    @extend_schema(responses={200: CountSerializer})
    @action(detail=False, methods=['get'])
    def count(self, request):
        """
        GET /api/expenses/count/
        """
        return Response({'count': count_expenses(user=request.user)})

    @extend_schema(request=None, responses={204: None})
    @action(detail=False, methods=['delete'], url_path='all')
    def delete_all(self, request):
        """
        Delete all of the caller's expenses.

        DELETE /api/expenses/all/
        """
        delete_all_expenses(user=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ExpenseGroupViewSet(viewsets.ModelViewSet):
    """
    ViewSet for expense groups, shared by all users.

    Deleting a group deletes its expenses.
    """

    serializer_class = ExpenseGroupSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = PagedResponsePagination
    lookup_value_regex = UUID_LOOKUP_REGEX
    http_method_names = ['get', 'post', 'put', 'delete', 'head', 'options']

    def get_queryset(self):
        if self.action != 'list':
            return list_expense_groups()

        filter_serializer = ExpenseGroupFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return list_expense_groups(name=filter_serializer.validated_data.get('name'))

    @extend_schema(request=ExpenseGroupInputSerializer, responses={201: ExpenseGroupSerializer})
    def create(self, request, *args, **kwargs):
        serializer = ExpenseGroupInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        group = create_expense_group(
            name=serializer.validated_data['name'],
            description=serializer.validated_data['description'],
        )
        return Response(ExpenseGroupSerializer(group).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=ExpenseGroupInputSerializer, responses={200: ExpenseGroupSerializer})
    def update(self, request, *args, **kwargs):
        serializer = ExpenseGroupInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ensure_matching_id(serializer.validated_data, kwargs['pk'])

        group = update_expense_group(
            group_id=kwargs['pk'],
            name=serializer.validated_data['name'],
            description=serializer.validated_data['description'],
        )
        return Response(ExpenseGroupSerializer(group).data)

    def destroy(self, request, *args, **kwargs):
        delete_expense_group(group_id=kwargs['pk'])
        return Response(status=status.HTTP_204_NO_CONTENT)
