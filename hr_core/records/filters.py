# hr_core/records/filters.py
import django_filters
from django.db.models import QuerySet

from hr_core.common import errors
from hr_core.records.models import MedicalReport


class ReportFilter(django_filters.FilterSet):
    report_type = django_filters.CharFilter(field_name="report_type", lookup_expr="iexact")
    reported_from = django_filters.DateFilter(field_name="reported_on", lookup_expr="gte")
    reported_to = django_filters.DateFilter(field_name="reported_on", lookup_expr="lte")

    class Meta:
        model = MedicalReport
        fields = ["report_type", "reported_from", "reported_to"]


def filter_reports(params, queryset: QuerySet[MedicalReport]) -> QuerySet[MedicalReport]:
    """Apply ReportFilter; malformed query params are a validation error, never ignored."""
    filterset = ReportFilter(params, queryset=queryset)
    if not filterset.is_valid():
        details = {field: [str(msg) for msg in msgs] for field, msgs in filterset.errors.items()}
        raise errors.ValidationError("Invalid report filter.", details=details)
    return filterset.qs
