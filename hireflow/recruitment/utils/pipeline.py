"""
Application pipeline funnel.

    NEW -> CONTACTED -> QUALIFIED -> PLACED

REJECTED sits outside the lane and can be reached from every non terminal
status. PLACED and REJECTED are terminal.
"""
from django.core.exceptions import ImproperlyConfigured

from hireflow.recruitment.constants import (
    ApplicationStatus,
    ClientDecision,
    SYNC_REGRESSION,
    SYNC_TERMINAL_PLACED,
    SYNC_TERMINAL_REJECTED,
)

FUNNEL_ORDER = {
    ApplicationStatus.NEW: 0,
    ApplicationStatus.CONTACTED: 1,
    ApplicationStatus.QUALIFIED: 2,
    ApplicationStatus.PLACED: 3,
    ApplicationStatus.REJECTED: -1,
}

TERMINAL_STATUSES = frozenset({
    ApplicationStatus.PLACED,
    ApplicationStatus.REJECTED,
})

DECISION_STATUS_MAPPER = {
    # approval means fit, placement stays a separate milestone
    ClientDecision.APPROVED: ApplicationStatus.QUALIFIED,
    ClientDecision.REJECTED: ApplicationStatus.REJECTED,
    ClientDecision.PENDING: None,
}

_unranked = set(ApplicationStatus) - set(FUNNEL_ORDER)
if _unranked:
    raise ImproperlyConfigured(f"Funnel order missing for {sorted(_unranked)}")
_unmapped = set(ClientDecision) - set(DECISION_STATUS_MAPPER)
if _unmapped:
    raise ImproperlyConfigured(f"Status mapping missing for {sorted(_unmapped)}")


def _as_status(value):
    return ApplicationStatus(value)


def funnel_order(status):
    return FUNNEL_ORDER[_as_status(status)]


def is_terminal(status):
    return _as_status(status) in TERMINAL_STATUSES


def map_decision_to_status(decision):
    """Target application status for a client decision, None for no change."""
    return DECISION_STATUS_MAPPER[ClientDecision(decision)]


def is_transition_allowed(current, target):
    """
    :param current: status the application has now
    :param target: status it should move to
    :return: True when the move respects the funnel
    """
    current, target = _as_status(current), _as_status(target)

    if current in TERMINAL_STATUSES:
        return False

    if target == ApplicationStatus.REJECTED:
        return True

    return FUNNEL_ORDER[target] > FUNNEL_ORDER[current]


def explain_blocked_transition(current, target):
    """
    Reason a transition is refused, empty string if it is allowed.
    """
    current, target = _as_status(current), _as_status(target)

    if current == ApplicationStatus.PLACED:
        return SYNC_TERMINAL_PLACED
    if current == ApplicationStatus.REJECTED:
        return SYNC_TERMINAL_REJECTED
    if not is_transition_allowed(current, target):
        return SYNC_REGRESSION
    return ''
