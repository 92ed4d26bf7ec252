from django_filters.rest_framework import DjangoFilterBackend
from rest_framework.filters import OrderingFilter, SearchFilter

from hireflow.core.mixins.viewset_mixins import ListCreateRetrieveUpdateViewSetMixin
from hireflow.recruitment.api.v1.filterset_classes import ShortlistFilter
from hireflow.recruitment.api.v1.mixins import (
    AgencyMixin,
    DemoAgencyReadOnlyMixin,
    DynamicFieldViewSetMixin,
)
from hireflow.recruitment.api.v1.serializers.shortlist import ShortlistSerializer
from hireflow.recruitment.models import Shortlist
from hireflow.recruitment.utils.shortlist import annotate_stats


class ShortlistViewSet(
    DemoAgencyReadOnlyMixin,
    AgencyMixin,
    DynamicFieldViewSetMixin,
    ListCreateRetrieveUpdateViewSetMixin
):
    """
    list:
    Shortlists of the agency, filter by `job` and `client`.

    create:
    Publishes `application_ids` of a job as a shortlist with a share link.

    retrieve:
    Shortlist with ordered candidates and client feedback.

    partial_update:
    Rename or edit the note of a shortlist.
    """
    queryset = Shortlist.objects.all()
    serializer_class = ShortlistSerializer
    filter_backends = (DjangoFilterBackend, SearchFilter, OrderingFilter)
    filterset_class = ShortlistFilter
    search_fields = ('name', 'job__title', 'client__name')
    ordering_fields = ('created_at', 'modified_at', 'name')
    ordering = ('-created_at',)
    http_method_names = ['get', 'post', 'patch', 'head', 'options']

    def get_queryset(self):
        return annotate_stats(
            super().get_queryset().select_related('job', 'client')
        )

    def get_serializer_exclude_fields(self):
        if self.action == 'list':
            return ['candidates']
        return super().get_serializer_exclude_fields()
