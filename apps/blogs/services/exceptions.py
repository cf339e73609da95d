"""Domain exceptions for blogs app."""
from rest_framework.exceptions import APIException


class BlogNotFoundError(APIException):
    """Blog does not exist."""
    status_code = 404
    default_detail = 'Blog not found.'
    default_code = 'blog_not_found'


class UnauthorizedBlogActionError(APIException):
    """Only the user who wrote a blog may change or delete it."""
    status_code = 403
    default_detail = 'You can only modify your own blogs.'
    default_code = 'not_blog_owner'
