from rest_framework.routers import SimpleRouter
from .views import BookViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r'books', viewset=BookViewSet, basename='book')

urlpatterns = router.urls
