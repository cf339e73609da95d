from rest_framework import mixins, status, viewsets, serializers
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema
from .models import User
from .permissions import IsAdministrator
from .serializers import (
    UserRegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
    UserUpdateSerializer,
    UserFilterSerializer,
    DeleteAccountSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    delete_user_account,
    update_user_profile,
    list_users,
    delete_user,
    count_users,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    PasswordConfirmationError,
)
from apps.common.lookups import UUID_LOOKUP_REGEX
from apps.common.pagination import PagedResponsePagination


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokensResponseSerializer()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class CountResponseSerializer(serializers.Serializer):
    count = serializers.IntegerField()


def _tokens_for(user):
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a new user account and receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new user account."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = register_user(
            email=serializer.validated_data['email'],
            password=serializer.validated_data['password'],
            username=serializer.validated_data['username'],
        )
    except UserRegistrationError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    return Response({
        'message': 'Registration successful',
        'user': UserSerializer(user).data,
        'tokens': _tokens_for(user),
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_user(
            email=serializer.validated_data['email'],
            password=serializer.validated_data['password'],
        )
    except InvalidCredentialsError:
        return Response({
            'error': 'Invalid credentials'
        }, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError:
        return Response({
            'error': 'Account is deactivated'
        }, status=status.HTTP_403_FORBIDDEN)

    return Response({
        'message': 'Login successful',
        'user': UserSerializer(user).data,
        'tokens': _tokens_for(user),
    })


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user profile."""
    return Response(UserSerializer(request.user).data)


@extend_schema(
    request=UserUpdateSerializer,
    responses={
        200: UserSerializer,
        400: ErrorResponseSerializer,
    },
    description="Replace the current user's profile fields.",
    tags=['auth'],
)
@api_view(['PUT'])
@permission_classes([IsAuthenticated])
def update_profile(request):
    """Update user profile."""
    serializer = UserUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = update_user_profile(
        user=request.user,
        username=serializer.validated_data['username'],
    )
    return Response(UserSerializer(user).data)


@extend_schema(
    request=DeleteAccountSerializer,
    responses={
        204: None,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
    },
    description="Delete the current account and everything it owns.",
    tags=['auth'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def delete_account(request):
    """Delete the caller's account after password confirmation."""
    serializer = DeleteAccountSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        delete_user_account(
            user_id=request.user.id,
            password=serializer.validated_data['password'],
        )
    except PasswordConfirmationError:
        return Response({
            'error': 'Invalid password'
        }, status=status.HTTP_401_UNAUTHORIZED)

    return Response(status=status.HTTP_204_NO_CONTENT)


class UserViewSet(mixins.DestroyModelMixin, viewsets.ReadOnlyModelViewSet):
    """
    Administrator view of all users.

    list: Paginated users, filterable by username/email
    retrieve: A single user
    destroy: Delete a user and everything they own
    count: Total number of users
    """

    serializer_class = UserSerializer
    permission_classes = [IsAuthenticated, IsAdministrator]
    pagination_class = PagedResponsePagination
    lookup_value_regex = UUID_LOOKUP_REGEX

    def get_queryset(self):
        if self.action != 'list':
            return User.objects.all()

        filter_serializer = UserFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        return list_users(
            username=params.get('username'),
            email=params.get('email'),
        )

    def destroy(self, request, *args, **kwargs):
        user = self.get_object()
        delete_user(user_id=user.id, deleted_by=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: CountResponseSerializer})
    @action(detail=False, methods=['get'])
    def count(self, request):
        """
        Total number of registered users.

        GET /api/users/count/
        """
        return Response({'count': count_users()})
