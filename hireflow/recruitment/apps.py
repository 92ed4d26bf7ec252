from django.apps import AppConfig


class RecruitmentConfig(AppConfig):
    name = 'hireflow.recruitment'
    default_auto_field = 'django.db.models.AutoField'
