from rest_framework.routers import DefaultRouter
from shops.views import ShopViewSet

router = DefaultRouter(trailing_slash=False)


# Shops
router.register(r'shops', ShopViewSet, basename='shops')
