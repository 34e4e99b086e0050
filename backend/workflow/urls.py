from rest_framework.routers import SimpleRouter

from .views import WorkflowViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"workflows", WorkflowViewSet, basename="workflow")

urlpatterns = router.urls
