from rest_framework import serializers
from shops.models import Shop


class ShopAddressSerializer(serializers.Serializer):
    street = serializers.CharField(source='address_street')
    pincode = serializers.CharField(source='address_pincode', max_length=10)
    village = serializers.CharField(source='address_village', max_length=100, required=False, allow_blank=True)
    taluka = serializers.CharField(source='address_taluka', max_length=100, required=False, allow_blank=True)
    district = serializers.CharField(source='address_district', max_length=100, required=False, allow_blank=True)
    state = serializers.CharField(source='address_state', max_length=100)
    country = serializers.CharField(source='address_country', max_length=100, required=False, allow_blank=True)


class ShopSerializer(serializers.ModelSerializer):
    businessCategory = serializers.CharField(source='business_category', max_length=100)
    ownerName = serializers.CharField(source='owner_name', max_length=255)
    shopName = serializers.CharField(source='shop_name', max_length=255)
    shopPhone = serializers.CharField(source='shop_phone', max_length=15)
    email = serializers.CharField(max_length=255)
    website = serializers.CharField(max_length=500, required=False, allow_blank=True)
    address = ShopAddressSerializer(source='*')
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Shop
        fields = [
            'id', 'businessCategory', 'ownerName', 'shopName', 'shopPhone',
            'email', 'website', 'address', 'createdAt', 'updatedAt',
        ]
        read_only_fields = ['id', 'createdAt', 'updatedAt']


def format_errors(errors, prefix=''):
    """Flatten DRF's nested error dict into `field: message` pairs."""
    parts = []
    for field, messages in errors.items():
        name = f"{prefix}{field}"
        if isinstance(messages, dict):
            parts.append(format_errors(messages, prefix=f"{name}."))
        else:
            parts.append(f"{name}: {' '.join(str(m) for m in messages)}")
    return '; '.join(parts)
