from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.common.lookups import UUID_LOOKUP_REGEX, ensure_matching_id
from apps.common.pagination import PagedResponsePagination
from .permissions import IsBlogOwnerOrReadOnly
from .serializers import BlogSerializer, BlogInputSerializer, BlogFilterSerializer
from .services import list_blogs, create_blog, update_blog, delete_blog


class BlogViewSet(viewsets.ModelViewSet):
    """
    ViewSet for blogs.

    list: Paginated blogs, newest first (public)
    retrieve: A single blog (public)
    create: Publish a blog
    update: Replace a blog (owner only)
    destroy: Delete a blog (owner only)
    """

    serializer_class = BlogSerializer
    permission_classes = [IsAuthenticatedOrReadOnly, IsBlogOwnerOrReadOnly]
    pagination_class = PagedResponsePagination
    lookup_value_regex = UUID_LOOKUP_REGEX
    http_method_names = ['get', 'post', 'put', 'delete', 'head', 'options']

    def get_queryset(self):
        if self.action != 'list':
            return list_blogs().select_related('user')

        filter_serializer = BlogFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        return list_blogs(
            author=params.get('author'),
            description=params.get('description'),
        ).select_related('user')

    @extend_schema(request=BlogInputSerializer, responses={201: BlogSerializer})
    def create(self, request, *args, **kwargs):
        serializer = BlogInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        blog = create_blog(
            user=request.user,
            description=serializer.validated_data['description'],
            text=serializer.validated_data['text'],
            author=serializer.validated_data['author'],
        )
        return Response(BlogSerializer(blog).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=BlogInputSerializer, responses={200: BlogSerializer})
    def update(self, request, *args, **kwargs):
        # 404 for unknown ids and 403 for other users' blogs, before validation
        self.get_object()

        serializer = BlogInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ensure_matching_id(serializer.validated_data, kwargs['pk'])

        blog = update_blog(
            user=request.user,
            blog_id=kwargs['pk'],
            description=serializer.validated_data['description'],
            text=serializer.validated_data['text'],
            author=serializer.validated_data['author'],
        )
        return Response(BlogSerializer(blog).data)

    def destroy(self, request, *args, **kwargs):
        self.get_object()
        delete_blog(user=request.user, blog_id=kwargs['pk'])
        return Response(status=status.HTTP_204_NO_CONTENT)
