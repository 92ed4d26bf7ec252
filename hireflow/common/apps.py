from django.apps import AppConfig


class CommonConfig(AppConfig):
    name = 'hireflow.common'
    default_auto_field = 'django.db.models.AutoField'
