from django.urls import path, include

urlpatterns = [
    path('shortlists/', include('hireflow.recruitment.api.v1.urls.shortlist')),
    path('activity/', include('hireflow.recruitment.api.v1.urls.activity')),
    path('public/', include('hireflow.recruitment.api.v1.urls.public')),
]
