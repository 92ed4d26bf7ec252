from django.urls import path

from hireflow.recruitment.api.v1.views import public

app_name = 'public'

urlpatterns = [
    path(
        'shortlist/<str:share_token>/feedback/',
        public.PublicShortlistFeedbackView.as_view(),
        name='shortlist-feedback'
        # all public
    ),
]
