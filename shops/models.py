from django.db import models
import uuid


class Shop(models.Model):
    """Retailer record. The address is stored flat and nested again by the serializer."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    business_category = models.CharField(max_length=100)
    owner_name = models.CharField(max_length=255)
    shop_name = models.CharField(max_length=255)
    shop_phone = models.CharField(max_length=15)
    email = models.CharField(max_length=255)
    website = models.CharField(max_length=500, blank=True, default='')

    # Address
    address_street = models.TextField()
    address_pincode = models.CharField(max_length=10)
    address_village = models.CharField(max_length=100, blank=True, default='')
    address_taluka = models.CharField(max_length=100, blank=True, default='')
    address_district = models.CharField(max_length=100, blank=True, default='')
    address_state = models.CharField(max_length=100)
    address_country = models.CharField(max_length=100, default='India')

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['created_at']

    def __str__(self):
        return f"{self.shop_name} ({self.business_category})"
