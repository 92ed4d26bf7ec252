from django.db import models


class ApplicationStatus(models.TextChoices):
    NEW = 'NEW', 'New'
    CONTACTED = 'CONTACTED', 'Contacted'
    QUALIFIED = 'QUALIFIED', 'Qualified'
    PLACED = 'PLACED', 'Placed'
    REJECTED = 'REJECTED', 'Rejected'


class ClientDecision(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    APPROVED = 'APPROVED', 'Approved'
    REJECTED = 'REJECTED', 'Rejected'


OPEN, ON_HOLD, CLOSED = 'OPEN', 'ON_HOLD', 'CLOSED'
JOB_STATUS_CHOICES = (
    (OPEN, 'Open'),
    (ON_HOLD, 'On Hold'),
    (CLOSED, 'Closed'),
)

# decisions an anonymous client may submit through a share link
SUBMITTABLE_DECISIONS = (
    ClientDecision.APPROVED,
    ClientDecision.REJECTED,
)

SHORTLIST_NAME_MAX_LENGTH = 200
SHORTLIST_NOTE_MAX_LENGTH = 2000
FEEDBACK_COMMENT_MAX_LENGTH = 1000

# Feedback sync outcomes, reported in SyncResult.reason
SYNC_DISABLED = 'disabled'
SYNC_NO_STATUS_MAPPING = 'no status mapping'
SYNC_NOT_FOUND = 'not found'
SYNC_AGENCY_MISMATCH = 'agency mismatch'
SYNC_TERMINAL_PLACED = 'terminal: placed'
SYNC_TERMINAL_REJECTED = 'terminal: rejected'
SYNC_REGRESSION = 'regression/no-op'
SYNC_DEMO_SIMULATED = 'demo mode simulated'
SYNC_UPDATED = 'updated'
SYNC_CONCURRENT_MODIFICATION = 'concurrent modification'

FEEDBACK_SYNC_NOTE_TEMPLATE = (
    'Status auto-updated from client feedback on shortlist "{shortlist_name}" at {timestamp}'
)
