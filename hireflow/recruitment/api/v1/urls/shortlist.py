from rest_framework.routers import DefaultRouter

from hireflow.recruitment.api.v1.views import shortlist

app_name = 'shortlist'

router = DefaultRouter()

router.register(
    r'',
    shortlist.ShortlistViewSet,
    basename='shortlist'
    # private
)

urlpatterns = router.urls
