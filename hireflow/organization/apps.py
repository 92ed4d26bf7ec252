from django.apps import AppConfig


class OrganizationConfig(AppConfig):
    name = 'hireflow.organization'
    default_auto_field = 'django.db.models.AutoField'
