from django.core.management.base import BaseCommand, CommandError

from registration.filters import FILTER_FIELDS, apply_filters
from registration.services.shop_export import ShopExcelExporter, ShopPDFGenerator
from shops.models import Shop
from shops.serializers import ShopSerializer


EXPORTERS = {
    'xlsx': (ShopExcelExporter, 'generate_xlsx'),
    'pdf': (ShopPDFGenerator, 'generate_pdf'),
}


class Command(BaseCommand):
    help = "Export shops (optionally filtered) to an Excel or PDF file"

    def add_arguments(self, parser):
        parser.add_argument('--format', choices=sorted(EXPORTERS), default='xlsx')
        parser.add_argument('--output', help="Output path (defaults to shops.xlsx / shops.pdf)")
        for field in FILTER_FIELDS:
            parser.add_argument(f'--{field}', default='')

    def handle(self, *args, **options):
        exporter_class, method_name = EXPORTERS[options['format']]

        records = ShopSerializer(Shop.objects.all(), many=True).data
        criteria = {field: options[field] for field in FILTER_FIELDS}
        records = apply_filters(records, criteria)

        exporter = exporter_class(records)
        filename = options['output'] or exporter.filename

        try:
            content = getattr(exporter, method_name)()
        except Exception as e:
            raise CommandError(f"Export failed: {e}")

        with open(filename, 'wb') as f:
            f.write(content)

        self.stdout.write(
            self.style.SUCCESS(
                f"{len(records)} shops exported successfully → {filename}"
            )
        )
