import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from hireflow.recruitment.api.v1.serializers.feedback import PublicFeedbackSerializer
from hireflow.recruitment.api.v1.throttling import FeedbackRateThrottle
from hireflow.recruitment.utils.feedback_sync import (
    SyncContext,
    sync_application_status_from_feedback,
)
from hireflow.recruitment.utils.shortlist import get_feedback_map, resolve_share_token

logger = logging.getLogger(__name__)


class PublicShortlistFeedbackView(APIView):
    """
    get:
    Decisions already recorded on the shortlist, keyed by application id.

    post:
    Record the client's decision about one candidate of the shortlist.
    """
    # it is public api, the share token is the only credential
    authentication_classes = []
    permission_classes = [AllowAny]
    throttle_classes = [FeedbackRateThrottle]

    def get_throttles(self):
        if self.request.method == 'POST':
            return super().get_throttles()
        return []

    def get(self, request, share_token):
        shortlist = resolve_share_token(share_token)
        return Response({'feedback': get_feedback_map(shortlist)})

    def post(self, request, share_token):
        shortlist = resolve_share_token(share_token)
        serializer = PublicFeedbackSerializer(
            data=request.data,
            context={'request': request, 'shortlist': shortlist, 'view': self}
        )
        serializer.is_valid(raise_exception=True)
        feedback = serializer.save()

        is_demo = shortlist.agency.is_demo
        self.sync_application_status(shortlist, feedback, is_demo)

        data = {
            'success': True,
            'feedback': serializer.data,
        }
        if is_demo:
            data['message'] = 'Feedback recorded. (Demo mode - not actually stored)'
        return Response(data, status=status.HTTP_200_OK)

    @staticmethod
    def sync_application_status(shortlist, feedback, is_demo):
        """
        The feedback is already committed here; a failing sync is logged and
        never reported to the client.
        """
        ctx = SyncContext(
            feedback_id=feedback.id,
            application_id=feedback.application_id,
            shortlist_id=shortlist.id,
            shortlist_name=shortlist.name,
            agency_id=shortlist.agency_id,
            decision=feedback.decision,
            is_demo=is_demo,
        )
        try:
            result = sync_application_status_from_feedback(ctx)
        except Exception:
            logger.exception(
                f"Syncing feedback {feedback.id} on shortlist {shortlist.id} failed."
            )
            return None

        logger.info(
            f"Feedback sync for application {feedback.application_id} on "
            f"shortlist {shortlist.id}: {result.as_dict()}"
        )
        return result
