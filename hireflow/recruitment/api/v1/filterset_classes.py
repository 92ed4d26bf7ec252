import django_filters.rest_framework as filters

from hireflow.common.models import EventLog
from hireflow.core.constants.common import EVENT_LOG_TYPE_CHOICES
from hireflow.recruitment.models import Shortlist


class ShortlistFilter(filters.FilterSet):
    class Meta:
        model = Shortlist
        fields = ['job', 'client']


class EventLogFilter(filters.FilterSet):
    type = filters.MultipleChoiceFilter(
        label='Type',
        choices=EVENT_LOG_TYPE_CHOICES
    )

    class Meta:
        model = EventLog
        fields = ['application', 'type']
