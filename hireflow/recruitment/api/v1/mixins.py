from django.utils.translation import gettext_lazy as _
from rest_framework.exceptions import PermissionDenied
from rest_framework.generics import get_object_or_404
from rest_framework.permissions import SAFE_METHODS

from hireflow.organization.models import Agency
from hireflow.recruitment.api.v1.permissions import IsAgencyMember

DEMO_READ_ONLY = 'DEMO_READ_ONLY'


class DynamicFieldViewSetMixin:
    """"
    :cvar serializer_include_fields:
        fields to include in serializer

        type -->  iterable

        set this value or override get_serializer_include_fields

    :cvar serializer_exclude_fields:
        fields to exclude in serializer

        type -->  iterable

        set this value or override get_serializer_exclude_fields

    """
    serializer_include_fields = None
    serializer_exclude_fields = None

    def get_serializer(self, *args, **kwargs):
        serializer_class = self.get_serializer_class()
        kwargs['context'] = self.get_serializer_context()

        kwargs['fields'] = self.get_serializer_include_fields()
        kwargs['exclude_fields'] = self.get_serializer_exclude_fields()
        return serializer_class(*args, **kwargs)

    def get_serializer_include_fields(self):
        return self.serializer_include_fields

    def get_serializer_exclude_fields(self):
        return self.serializer_exclude_fields


class AgencyMixin:
    """
    Resolves the agency from the `agency` query param (slug) and limits
    access to its administrators.
    """
    permission_classes = [IsAgencyMember]
    _agency = None

    def get_agency(self):
        if not self._agency:
            slug = self.request.query_params.get('agency', None)
            if slug is not None:
                self._agency = get_object_or_404(Agency, slug=slug)
        return self._agency

    @property
    def agency(self):
        return self.get_agency()

    def get_queryset(self):
        return super().get_queryset().filter(agency=self.agency)

    def get_serializer_context(self):
        ctx = super().get_serializer_context()
        ctx['agency'] = self.agency
        return ctx


class DemoAgencyReadOnlyMixin:
    """
    The demo agency is shared by every visitor, nothing may be written
    through the agency facing API.
    """

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        agency = getattr(self, 'agency', None)
        if request.method not in SAFE_METHODS and agency and agency.is_demo:
            raise PermissionDenied({
                'detail': _('Demo agency is read only.'),
                'code': DEMO_READ_ONLY
            })
