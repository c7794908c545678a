from django.db import migrations, models
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Shop',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('business_category', models.CharField(max_length=100)),
                ('owner_name', models.CharField(max_length=255)),
                ('shop_name', models.CharField(max_length=255)),
                ('shop_phone', models.CharField(max_length=15)),
                ('email', models.CharField(max_length=255)),
                ('website', models.CharField(blank=True, default='', max_length=500)),
                ('address_street', models.TextField()),
                ('address_pincode', models.CharField(max_length=10)),
                ('address_village', models.CharField(blank=True, default='', max_length=100)),
                ('address_taluka', models.CharField(blank=True, default='', max_length=100)),
                ('address_district', models.CharField(blank=True, default='', max_length=100)),
                ('address_state', models.CharField(max_length=100)),
                ('address_country', models.CharField(default='India', max_length=100)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['created_at'],
            },
        ),
    ]
