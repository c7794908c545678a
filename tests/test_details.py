from unittest.mock import patch

import pytest

from registration.details import ShopDetailsView
from registration.workflow import WorkflowState
from tests.conftest import FakeDirectoryAPI, make_shop


@pytest.fixture
def api():
    return FakeDirectoryAPI(shops=[
        make_shop('1', category='Electronics', state='Maharashtra', district='Pune'),
        make_shop('2', category='Electrical', state='Maharashtra', district='Nashik'),
        make_shop('3', category='Automobiles', state='Goa', district='North Goa'),
    ])


@pytest.fixture
def details(api, notifier, scheduler, workflow):
    view = ShopDetailsView(api, notifier, scheduler, workflow=workflow, debounce=0.5)
    view.open()
    return view


def test_open_loads_shops_and_locations(details, api):
    assert details.is_open
    assert len(details.shops) == 3
    assert details.summary == 'Showing 3 retailers'
    assert details.locations['states'] == ['Maharashtra']
    assert [call[1] for call in api.calls if call[0] == 'unique'] == [
        'states', 'districts', 'talukas', 'villages',
    ]


def test_filtered_summary(details, advance):
    details.set_filter('state', 'goa')
    advance(0.5)

    assert details.summary == 'Showing 1 retailer (filtered)'

    details.set_filter('category', 'Computer and IT')
    advance(0.5)
    assert details.results == []
    assert details.empty_message == 'No retailers found matching the current filters.'

    details.clear_filters()
    assert details.summary == 'Showing 3 retailers'


def test_empty_listing_message(notifier, scheduler):
    view = ShopDetailsView(FakeDirectoryAPI(), notifier, scheduler)
    view.open()
    assert view.empty_message == 'No retailers submitted yet.'
    assert view.summary == 'Showing 0 retailers'


def test_list_failure_notifies(api, notifier, scheduler):
    api.failing.add('list')
    view = ShopDetailsView(api, notifier, scheduler)

    assert view.refresh() is False
    assert view.shops == []
    assert notifier.active.message == 'Failed to fetch retailer data'


def test_location_failure_is_non_fatal(api, notifier, scheduler):
    api.failing.add('unique')
    view = ShopDetailsView(api, notifier, scheduler)
    view.open()

    assert len(view.shops) == 3
    assert view.locations == {'states': [], 'districts': [], 'talukas': [], 'villages': []}
    assert notifier.history[-1].message == 'Failed to fetch location suggestions'


def test_delete_refreshes_listing(details, api, notifier):
    assert details.delete('2') is True

    assert api.count('delete') == 1
    assert [shop['id'] for shop in details.shops] == ['1', '3']
    assert notifier.history[-1].message == 'Retailer deleted successfully!'


def test_delete_without_id(details, api, notifier):
    assert details.delete('') is False
    assert details.delete(None) is False
    assert api.count('delete') == 0
    assert notifier.history[-1].message == 'Cannot delete: Invalid retailer ID'


def test_delete_failure_shows_server_error(details, api, notifier):
    api.failing.add('delete')

    assert details.delete('1') is False
    assert len(details.shops) == 3
    assert notifier.history[-1].message == 'delete failed'
    assert details.deleting_ids == set()


def test_delete_in_flight_is_not_repeated(notifier, scheduler):
    class SlowAPI(FakeDirectoryAPI):
        def delete_shop(self, shop_id):
            nested.append(view.delete(shop_id))
            return super().delete_shop(shop_id)

    nested = []
    api = SlowAPI(shops=[make_shop('1')])
    view = ShopDetailsView(api, notifier, scheduler)

    assert view.delete('1') is True
    assert nested == [False]
    assert api.count('delete') == 1


def test_edit_loads_workflow_and_closes(details, workflow, advance):
    details.set_filter('state', 'goa')
    advance(0.5)

    details.edit(details.results[0])

    assert not details.is_open
    assert not details.filter.is_filtered
    assert workflow.state == WorkflowState.STEP1_BUSINESS_INFO
    assert workflow.edit_target == '3'
    assert workflow.draft['shopName'] == 'Shop 3'


def test_edit_requires_workflow(notifier, scheduler):
    view = ShopDetailsView(FakeDirectoryAPI(), notifier, scheduler)
    with pytest.raises(RuntimeError):
        view.edit(make_shop('1'))


def test_export_uses_filtered_results(details, advance):
    details.set_filter('state', 'maharashtra')
    advance(0.5)

    with patch('registration.details.ShopExcelExporter') as exporter_class:
        exporter_class.return_value.filename = 'shops.xlsx'
        exporter_class.return_value.generate_xlsx.return_value = b'PK-data'

        assert details.export_excel() == ('shops.xlsx', b'PK-data')

    exported = exporter_class.call_args[0][0]
    assert [shop['id'] for shop in exported] == ['1', '2']


def test_pdf_export(details):
    filename, content = details.export_pdf()

    assert filename == 'shops.pdf'
    assert content.startswith(b'%PDF')


def test_export_failure_notifies(details, notifier):
    with patch('registration.details.ShopPDFGenerator.generate_pdf', side_effect=OSError('disk full')):
        assert details.export_pdf() is None

    assert notifier.history[-1].kind == 'error'
    assert notifier.history[-1].message == 'PDF export failed: disk full'


def test_category_filter_options(details, notifier, scheduler, settings):
    assert details.categories == ['Computer and IT', 'Electronics', 'Electrical', 'Automobiles']

    settings.BUSINESS_CATEGORIES = ['Groceries']
    assert ShopDetailsView(FakeDirectoryAPI(), notifier, scheduler).categories == ['Groceries']
