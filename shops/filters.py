import django_filters
from shops.models import Shop


class ShopFilter(django_filters.FilterSet):
    category = django_filters.CharFilter(field_name='business_category')
    state = django_filters.CharFilter(field_name='address_state')
    district = django_filters.CharFilter(field_name='address_district')
    taluka = django_filters.CharFilter(field_name='address_taluka')
    village = django_filters.CharFilter(field_name='address_village')

    class Meta:
        model = Shop
        fields = ['category', 'state', 'district', 'taluka', 'village']
