from rest_framework.permissions import BasePermission


class IsAgencyMember(BasePermission):
    """
    Allows access to administrators of the agency resolved by the view
    (see `AgencyMixin`) and to superusers.
    """
    message = 'You are not an administrator of this agency.'

    def has_permission(self, request, view):
        agency = getattr(view, 'agency', None)
        return bool(agency and agency.is_member(request.user))
