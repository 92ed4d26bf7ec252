from rest_framework.routers import DefaultRouter

from hireflow.recruitment.api.v1.views import activity

app_name = 'activity'

router = DefaultRouter()

router.register(
    r'',
    activity.ActivityViewSet,
    basename='activity'
    # private
)

urlpatterns = router.urls
