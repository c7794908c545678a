from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.permissions import AllowAny
from rest_framework.decorators import api_view, permission_classes
from django_filters.rest_framework import DjangoFilterBackend
import logging
import uuid

from shops.models import Shop
from shops.filters import ShopFilter
from shops.serializers import ShopSerializer, format_errors

logger = logging.getLogger(__name__)


class ShopViewSet(viewsets.GenericViewSet):
    permission_classes = [AllowAny]
    queryset = Shop.objects.all()
    serializer_class = ShopSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_class = ShopFilter

    def _get_shop(self, pk):
        """Returns (shop, None) or (None, error response)."""
        try:
            uuid.UUID(str(pk))
        except ValueError:
            return None, Response({'error': 'Invalid shop ID'}, status=status.HTTP_400_BAD_REQUEST)

        shop = Shop.objects.filter(pk=pk).first()
        if shop is None:
            return None, Response({'error': 'Shop not found'}, status=status.HTTP_404_NOT_FOUND)
        return shop, None

    def list(self, request):
        try:
            queryset = self.filter_queryset(self.get_queryset())
            serializer = self.get_serializer(queryset, many=True)
            return Response(serializer.data)
        except Exception as e:
            logger.error(f"Error fetching shops: {e}")
            return Response({'error': f'Failed to fetch shops: {e}'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    def create(self, request):
        serializer = self.get_serializer(data=request.data)
        if not serializer.is_valid():
            logger.warning(f"Rejected shop create: {serializer.errors}")
            return Response(
                {'error': f'Failed to create shop: {format_errors(serializer.errors)}'},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            shop = serializer.save()
        except Exception as e:
            logger.error(f"Error creating shop: {e}")
            return Response({'error': f'Failed to create shop: {e}'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info(f"Created shop {shop.id} ({shop.shop_name})")
        return Response(serializer.data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        shop, error = self._get_shop(pk)
        if error is not None:
            return error

        serializer = self.get_serializer(shop, data=request.data, partial=True)
        if not serializer.is_valid():
            logger.warning(f"Rejected shop update {pk}: {serializer.errors}")
            return Response(
                {'error': f'Failed to update shop: {format_errors(serializer.errors)}'},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            serializer.save()
        except Exception as e:
            logger.error(f"Error updating shop {pk}: {e}")
            return Response({'error': f'Failed to update shop: {e}'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info(f"Updated shop {pk}")
        return Response(serializer.data)

    def destroy(self, request, pk=None):
        shop, error = self._get_shop(pk)
        if error is not None:
            return error

        try:
            shop.delete()
        except Exception as e:
            logger.error(f"Error deleting shop {pk}: {e}")
            return Response({'error': f'Failed to delete shop: {e}'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info(f"Deleted shop {pk}")
        return Response({'message': 'Shop deleted successfully'})


def _distinct_values(field, label):
    try:
        values = (
            Shop.objects.exclude(**{field: ''})
            .order_by(field)
            .values_list(field, flat=True)
            .distinct()
        )
        return Response(list(values))
    except Exception as e:
        logger.error(f"Error fetching {label}: {e}")
        return Response({'error': f'Failed to fetch {label}: {e}'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


@api_view(['GET'])
@permission_classes([AllowAny])
def unique_states(request):
    return _distinct_values('address_state', 'states')


@api_view(['GET'])
@permission_classes([AllowAny])
def unique_districts(request):
    return _distinct_values('address_district', 'districts')


@api_view(['GET'])
@permission_classes([AllowAny])
def unique_talukas(request):
    return _distinct_values('address_taluka', 'talukas')


@api_view(['GET'])
@permission_classes([AllowAny])
def unique_villages(request):
    return _distinct_values('address_village', 'villages')
