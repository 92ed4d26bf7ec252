from rest_framework import mixins
from rest_framework.viewsets import GenericViewSet


class ListViewSetMixin(mixins.ListModelMixin, GenericViewSet):
    """
    A viewset that provides `list` action.
    """
    pass


class ListCreateRetrieveUpdateViewSetMixin(mixins.ListModelMixin,
                                           mixins.CreateModelMixin,
                                           mixins.RetrieveModelMixin,
                                           mixins.UpdateModelMixin,
                                           GenericViewSet):
    """
    A viewset that provides `list`, `create`, `retrieve` and `update`
    actions.

    To use it, override the class and set the `.queryset` and
    `.serializer_class` attributes.
    """
    pass
