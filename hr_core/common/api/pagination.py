# hr_core/common/api/pagination.py
from __future__ import annotations

from rest_framework.pagination import PageNumberPagination


class DefaultPagination(PageNumberPagination):
    """
    Page-number pagination for feeds that grow without bound (notifications).
    Record lists (prescriptions, reports) are capped per view instead.

    Response shape: {count, next, previous, results}.
    """
    page_size = 20
    page_size_query_param = "page_size"
    max_page_size = 100
