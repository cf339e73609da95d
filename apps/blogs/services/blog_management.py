"""
Blog management service.

Reads are public; writes are limited to the blog's owner.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, DatabaseError
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.blogs.models import Blog

from .exceptions import BlogNotFoundError, UnauthorizedBlogActionError

logger = logging.getLogger(__name__)


def list_blogs(
    *,
    author: Optional[str] = None,
    description: Optional[str] = None
) -> QuerySet:
    """
    All blogs, newest first.

    Args:
        author: Case-insensitive substring of the author name
        description: Case-insensitive substring of the description
    """
    queryset = Blog.objects.all()
    if author:
        queryset = queryset.filter(author__icontains=author)
    if description:
        queryset = queryset.filter(description__icontains=description)
    return queryset.order_by('-created_at')


def get_blog(*, blog_id: UUID) -> Blog:
    try:
        return Blog.objects.get(id=blog_id)
    except Blog.DoesNotExist:
        raise BlogNotFoundError()


def _get_owned_blog_for_update(*, blog_id: UUID, user: User) -> Blog:
    try:
        blog = Blog.objects.select_for_update().get(id=blog_id)
    except Blog.DoesNotExist:
        raise BlogNotFoundError()

    if blog.user_id != user.id:
        logger.warning("User %s tried to modify blog %s owned by %s", user.id, blog_id, blog.user_id)
        raise UnauthorizedBlogActionError()
    return blog


@transaction.atomic
def create_blog(*, user: User, description: str, text: str, author: str) -> Blog:
    try:
        blog = Blog.objects.create(
            user=user,
            description=description,
            text=text,
            author=author,
        )
    except DatabaseError as e:
        logger.error("create_blog: an error occurred for user %s: %s", user.id, e)
        raise

    logger.info("User %s published blog %s", user.id, blog.id)
    return blog


@transaction.atomic
def update_blog(
    *,
    user: User,
    blog_id: UUID,
    description: str,
    text: str,
    author: str
) -> Blog:
    """
    Replace the content of a blog.

    Raises:
        BlogNotFoundError: If the blog doesn't exist
        UnauthorizedBlogActionError: If user is not the owner
    """
    blog = _get_owned_blog_for_update(blog_id=blog_id, user=user)

    blog.description = description
    blog.text = text
    blog.author = author

    try:
        blog.save()
    except DatabaseError as e:
        logger.error("update_blog: an error occurred for blog %s: %s", blog_id, e)
        raise

    return blog


@transaction.atomic
def delete_blog(*, user: User, blog_id: UUID) -> None:
    """
    Raises:
        BlogNotFoundError: If the blog doesn't exist
        UnauthorizedBlogActionError: If user is not the owner
    """
    blog = _get_owned_blog_for_update(blog_id=blog_id, user=user)
    blog.delete()
    logger.info("User %s deleted blog %s", user.id, blog_id)
