from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import serializers

from hireflow.common.models import EventLog
from hireflow.core.mixins.serializers import DynamicFieldsModelSerializer
from hireflow.core.mixins.viewset_mixins import ListViewSetMixin
from hireflow.recruitment.api.v1.filterset_classes import EventLogFilter
from hireflow.recruitment.api.v1.mixins import AgencyMixin


class EventLogSerializer(DynamicFieldsModelSerializer):
    type_display = serializers.CharField(source='get_type_display', read_only=True)

    class Meta:
        model = EventLog
        fields = (
            'id', 'type', 'type_display', 'application', 'payload', 'created_at',
        )


class ActivityViewSet(AgencyMixin, ListViewSetMixin):
    """
    Audit trail of the agency, newest first.
    """
    queryset = EventLog.objects.all()
    serializer_class = EventLogSerializer
    filter_backends = (DjangoFilterBackend,)
    filterset_class = EventLogFilter
