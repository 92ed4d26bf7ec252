# EventLog types
APPLICATION_STATUS_SYNCED_FROM_FEEDBACK = 'APPLICATION_STATUS_SYNCED_FROM_FEEDBACK'
SHORTLIST_CREATED = 'SHORTLIST_CREATED'
CLIENT_FEEDBACK_RECORDED = 'CLIENT_FEEDBACK_RECORDED'

EVENT_LOG_TYPE_CHOICES = (
    (APPLICATION_STATUS_SYNCED_FROM_FEEDBACK, 'Application Status Synced From Feedback'),
    (SHORTLIST_CREATED, 'Shortlist Created'),
    (CLIENT_FEEDBACK_RECORDED, 'Client Feedback Recorded'),
)
