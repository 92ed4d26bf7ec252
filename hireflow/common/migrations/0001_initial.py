from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('organization', '0001_initial'),
        ('recruitment', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='EventLog',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('modified_at', models.DateTimeField(auto_now=True)),
                ('type', models.CharField(choices=[('APPLICATION_STATUS_SYNCED_FROM_FEEDBACK', 'Application Status Synced From Feedback'), ('SHORTLIST_CREATED', 'Shortlist Created'), ('CLIENT_FEEDBACK_RECORDED', 'Client Feedback Recorded')], db_index=True, max_length=64)),
                ('payload', models.JSONField(blank=True, default=dict)),
                ('agency', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='event_logs', to='organization.agency')),
                ('application', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='event_logs', to='recruitment.application')),
            ],
            options={
                'ordering': ('-created_at', '-id'),
            },
        ),
    ]
