from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from hireflow.core.mixins.serializers import DummySerializer
from hireflow.core.utils.common import DummyObject
from hireflow.recruitment.constants import (
    FEEDBACK_COMMENT_MAX_LENGTH,
    SUBMITTABLE_DECISIONS,
)
from hireflow.recruitment.utils.shortlist import record_feedback


class PublicFeedbackSerializer(DummySerializer):
    """
    Decision submitted by an anonymous client through a share link.

    expects `shortlist` in context.
    """
    applicationId = serializers.IntegerField(source='application_id')
    decision = serializers.ChoiceField(choices=SUBMITTABLE_DECISIONS)
    comment = serializers.CharField(
        max_length=FEEDBACK_COMMENT_MAX_LENGTH,
        allow_blank=True,
        allow_null=True,
        required=False
    )

    def validate(self, attrs):
        shortlist = self.context['shortlist']
        application = shortlist.applications.filter(
            id=attrs['application_id']
        ).first()
        if not application:
            raise serializers.ValidationError({
                'applicationId': _('Application not found in this shortlist.')
            })
        attrs['application'] = application
        return attrs

    def create(self, validated_data):
        shortlist = self.context['shortlist']
        comment = validated_data.get('comment') or ''

        if shortlist.agency.is_demo:
            # demo shortlists answer like real ones but keep nothing
            return DummyObject(
                id=None,
                application_id=validated_data['application_id'],
                decision=validated_data['decision'],
                comment=comment,
            )

        return record_feedback(
            shortlist=shortlist,
            application=validated_data['application'],
            decision=validated_data['decision'],
            comment=comment,
        )

    def to_representation(self, instance):
        return {
            'applicationId': instance.application_id,
            'decision': instance.decision,
            'comment': instance.comment or None,
        }
