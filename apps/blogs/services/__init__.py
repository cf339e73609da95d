from .exceptions import BlogNotFoundError, UnauthorizedBlogActionError

from .blog_management import (
    list_blogs,
    get_blog,
    create_blog,
    update_blog,
    delete_blog,
)


__all__ = [
    'BlogNotFoundError',
    'UnauthorizedBlogActionError',
    'list_blogs',
    'get_blog',
    'create_blog',
    'update_blog',
    'delete_blog',
]
