from django.db import transaction
from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from hireflow.core.mixins.serializers import DynamicFieldsModelSerializer
from hireflow.organization.models import Client
from hireflow.recruitment.constants import SHORTLIST_NAME_MAX_LENGTH, SHORTLIST_NOTE_MAX_LENGTH
from hireflow.recruitment.models import Application, Job, Shortlist
from hireflow.recruitment.utils.shortlist import (
    build_stats,
    create_shortlist,
    get_aggregate_stats,
)


class ShortlistApplicationSerializer(DynamicFieldsModelSerializer):
    class Meta:
        model = Application
        fields = (
            'id', 'full_name', 'email', 'phone', 'cv_url', 'status', 'tags',
        )


class ShortlistSerializer(DynamicFieldsModelSerializer):
    job = serializers.PrimaryKeyRelatedField(queryset=Job.objects.all())
    client = serializers.PrimaryKeyRelatedField(
        queryset=Client.objects.all(),
        allow_null=True,
        required=False
    )
    name = serializers.CharField(max_length=SHORTLIST_NAME_MAX_LENGTH)
    note = serializers.CharField(
        max_length=SHORTLIST_NOTE_MAX_LENGTH,
        allow_blank=True,
        required=False
    )
    application_ids = serializers.ListField(
        child=serializers.IntegerField(),
        write_only=True,
        allow_empty=True
    )
    job_title = serializers.ReadOnlyField(source='job.title')
    client_name = serializers.ReadOnlyField(source='client.name')
    share_url = serializers.ReadOnlyField()
    candidates_count = serializers.SerializerMethodField()
    feedback = serializers.SerializerMethodField()
    candidates = serializers.SerializerMethodField()

    class Meta:
        model = Shortlist
        fields = (
            'id', 'name', 'note', 'job', 'job_title', 'client', 'client_name',
            'application_ids', 'share_token', 'share_url', 'candidates_count',
            'feedback', 'candidates', 'created_at', 'modified_at',
        )
        read_only_fields = ('share_token', 'created_at', 'modified_at')

    def get_fields(self):
        fields = super().get_fields()
        agency = self.context.get('agency')
        if agency is not None:
            fields['job'].queryset = Job.objects.filter(agency=agency)
            fields['client'].queryset = Client.objects.filter(agency=agency)
        if self.instance is not None:
            # membership is fixed once the link is shared
            fields.pop('application_ids', None)
            fields['job'].read_only = True
            fields['client'].read_only = True
        return fields

    def validate(self, attrs):
        job, client = attrs.get('job'), attrs.get('client')
        if job and client and job.client_id and job.client_id != client.id:
            raise serializers.ValidationError({
                'client': _('Client does not match the client of the job.')
            })
        return super().validate(attrs)

    def create(self, validated_data):
        job = validated_data['job']
        return create_shortlist(
            agency=self.context['agency'],
            job=job,
            name=validated_data['name'],
            application_ids=validated_data.get('application_ids'),
            client=validated_data.get('client'),
            note=validated_data.get('note', ''),
            created_by=self.request.user if self.request else None,
        )

    @transaction.atomic()
    def update(self, instance, validated_data):
        for attr in ('name', 'note'):
            if attr in validated_data:
                setattr(instance, attr, validated_data[attr])
        instance.save(update_fields=['name', 'note', 'modified_at'])
        return instance

    def get_stats(self, instance):
        if hasattr(instance, 'candidates_count'):
            return build_stats(
                total=instance.candidates_count,
                approved=instance.approved_count,
                rejected=instance.rejected_count,
            )
        return get_aggregate_stats(instance)

    def get_candidates_count(self, instance):
        return self.get_stats(instance)['total']

    def get_feedback(self, instance):
        return self.get_stats(instance)

    def get_candidates(self, instance):
        feedbacks = {
            feedback.application_id: feedback
            for feedback in instance.feedbacks.all()
        }
        candidates = []
        for item in instance.items.select_related('application'):
            feedback = feedbacks.get(item.application_id)
            candidates.append({
                'order': item.order,
                'application': ShortlistApplicationSerializer(
                    item.application,
                    context=self.context
                ).data,
                'feedback': {
                    'decision': feedback.decision,
                    'comment': feedback.comment,
                    'modified_at': feedback.modified_at,
                } if feedback else None,
            })
        return candidates
