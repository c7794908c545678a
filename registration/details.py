import logging

from django.conf import settings

from registration import notifications
from registration.filters import DebouncedFilter
from registration.services.directory_api import LOCATION_KINDS
from registration.services.shop_export import ShopExcelExporter, ShopPDFGenerator

logger = logging.getLogger(__name__)


class ShopDetailsView:
    """Listing of saved retailers with filters, delete/edit actions and export."""

    def __init__(self, api, notifier, scheduler, workflow=None, debounce=None):
        self.api = api
        self.notifier = notifier
        self.workflow = workflow
        self.filter = DebouncedFilter(scheduler, delay=debounce)
        self.is_open = False
        self.loading = False
        self.deleting_ids = set()
        self.locations = {kind: [] for kind in LOCATION_KINDS}

    @property
    def shops(self):
        return self.filter.records

    @property
    def results(self):
        return self.filter.results

    @property
    def summary(self):
        count = len(self.results)
        text = f"Showing {count} retailer{'' if count == 1 else 's'}"
        if self.filter.is_filtered:
            text += " (filtered)"
        return text

    @property
    def empty_message(self):
        if self.filter.is_filtered:
            return 'No retailers found matching the current filters.'
        return 'No retailers submitted yet.'

    @property
    def categories(self):
        if self.workflow is not None:
            return self.workflow.categories
        return list(settings.BUSINESS_CATEGORIES)

    def open(self):
        self.refresh()
        self.load_locations()
        self.is_open = True

    def close(self):
        self.filter.clear()
        self.is_open = False

    def refresh(self):
        self.loading = True
        try:
            result = self.api.list_shops()
        finally:
            self.loading = False

        if not result.get("success"):
            self.notifier.show('Failed to fetch retailer data', notifications.ERROR)
            self.filter.set_records([])
            return False

        self.filter.set_records(result["data"] or [])
        return True

    def load_locations(self):
        failed = []
        for kind in LOCATION_KINDS:
            result = self.api.get_unique_values(kind)
            if result.get("success"):
                self.locations[kind] = list(result["data"] or [])
            else:
                self.locations[kind] = []
                failed.append(kind)

        if failed:
            logger.warning(f"Failed to fetch location lists: {', '.join(failed)}")
            self.notifier.show('Failed to fetch location suggestions', notifications.ERROR)

    # -- filters -------------------------------------------------------------

    def set_filter(self, field, value):
        self.filter.set_criterion(field, value)

    def clear_filters(self):
        self.filter.clear()

    # -- record actions ------------------------------------------------------

    def delete(self, shop_id):
        if not shop_id:
            logger.error("Delete requested without a shop id")
            self.notifier.show('Cannot delete: Invalid retailer ID', notifications.ERROR)
            return False

        if shop_id in self.deleting_ids:
            return False

        self.deleting_ids.add(shop_id)
        try:
            result = self.api.delete_shop(shop_id)
        finally:
            self.deleting_ids.discard(shop_id)

        if not result.get("success"):
            self.notifier.show(result.get("error") or 'Failed to delete retailer', notifications.ERROR)
            return False

        self.notifier.show('Retailer deleted successfully!', notifications.SUCCESS)
        self.refresh()
        return True

    def edit(self, record):
        if self.workflow is None:
            raise RuntimeError("No registration workflow attached to the details view")
        self.workflow.load_for_edit(record)
        self.close()

    # -- export --------------------------------------------------------------

    def _export(self, exporter_class, method_name, label):
        exporter = exporter_class(self.results)
        try:
            content = getattr(exporter, method_name)()
        except Exception as e:
            logger.exception(f"{label} export failed")
            self.notifier.show(f'{label} export failed: {e}', notifications.ERROR)
            return None
        return exporter.filename, content

    def export_excel(self):
        return self._export(ShopExcelExporter, 'generate_xlsx', 'Excel')

    def export_pdf(self):
        return self._export(ShopPDFGenerator, 'generate_pdf', 'PDF')
