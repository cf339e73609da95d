import math

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response
from rest_framework.utils.urls import replace_query_param


class PagedResponsePagination(PageNumberPagination):
    """
    Page-number pagination shared by every list endpoint.

    Query Parameters:
        pageNumber (int): 1-based page, values below 1 fall back to 1
        pageSize (int): Items per page, capped at max_page_size

    A page past the end returns an empty ``results`` list instead of a 404,
    so clients can always trust ``total_records`` and ``total_pages``.
    """
    page_size = 10
    page_query_param = 'pageNumber'
    page_size_query_param = 'pageSize'
    max_page_size = 100

    def get_page_number(self, request, paginator=None):
        try:
            page_number = int(request.query_params.get(self.page_query_param, 1))
        except (TypeError, ValueError):
            return 1
        return max(page_number, 1)

    def paginate_queryset(self, queryset, request, view=None):
        self.request = request
        self.current_page_size = self.get_page_size(request)
        self.page_number = self.get_page_number(request)
        self.total_records = queryset.count()
        self.total_pages = math.ceil(self.total_records / self.current_page_size)

        offset = (self.page_number - 1) * self.current_page_size
        if offset >= self.total_records:
            return []
        return list(queryset[offset:offset + self.current_page_size])

    def _page_link(self, page_number):
        url = self.request.build_absolute_uri()
        url = replace_query_param(url, self.page_query_param, page_number)
        return replace_query_param(url, self.page_size_query_param, self.current_page_size)

    def get_next_link(self):
        if self.page_number >= self.total_pages:
            return None
        return self._page_link(self.page_number + 1)

    def get_previous_link(self):
        if self.page_number <= 1:
            return None
        return self._page_link(self.page_number - 1)

    def get_paginated_response(self, data):
        return Response({
            'results': data,
            'page_number': self.page_number,
            'page_size': self.current_page_size,
            'total_pages': self.total_pages,
            'total_records': self.total_records,
            'first_page': self._page_link(1),
            'last_page': self._page_link(max(self.total_pages, 1)),
            'next_page': self.get_next_link(),
            'previous_page': self.get_previous_link(),
        })

    def get_paginated_response_schema(self, schema):
        link = {'type': 'string', 'nullable': True, 'format': 'uri'}
        return {
            'type': 'object',
            'required': ['results', 'total_records'],
            'properties': {
                'results': schema,
                'page_number': {'type': 'integer', 'example': 1},
                'page_size': {'type': 'integer', 'example': 10},
                'total_pages': {'type': 'integer', 'example': 3},
                'total_records': {'type': 'integer', 'example': 25},
                'first_page': link,
                'last_page': link,
                'next_page': link,
                'previous_page': link,
            },
        }
