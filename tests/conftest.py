"""
Shared fixtures for the shop directory tests.

The registration core is driven with:
- a fake clock feeding a ``sched.scheduler`` so timers fire on demand
- in-memory fakes for the Directory API and the PIN code service
"""

import copy
import sched

import pytest

from registration.notifications import NotificationQueue
from registration.workflow import RegistrationWorkflow


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.now += seconds


class FakeDirectoryAPI:
    """In-memory stand-in for DirectoryAPIService with the same result dicts."""

    def __init__(self, shops=None, locations=None):
        self.shops = [copy.deepcopy(shop) for shop in (shops or [])]
        self.locations = locations or {
            'states': ['Maharashtra'],
            'districts': ['Pune'],
            'talukas': ['Haveli'],
            'villages': ['Wagholi'],
        }
        self.calls = []
        self.failing = set()
        self._next_id = 1

    def _failure(self, operation):
        return {"success": False, "error": f"{operation} failed", "status_code": 500}

    def list_shops(self, filters=None):
        self.calls.append(('list', filters))
        if 'list' in self.failing:
            return self._failure('list')
        return {"success": True, "data": copy.deepcopy(self.shops), "status_code": 200}

    def create_shop(self, shop_data):
        self.calls.append(('create', copy.deepcopy(shop_data)))
        if 'create' in self.failing:
            return self._failure('create')
        shop = copy.deepcopy(shop_data)
        shop['id'] = f"shop-{self._next_id}"
        self._next_id += 1
        self.shops.append(shop)
        return {"success": True, "data": copy.deepcopy(shop), "status_code": 201}

    def update_shop(self, shop_id, shop_data):
        self.calls.append(('update', shop_id, copy.deepcopy(shop_data)))
        if 'update' in self.failing:
            return self._failure('update')
        for index, shop in enumerate(self.shops):
            if shop.get('id') == shop_id:
                updated = copy.deepcopy(shop_data)
                updated['id'] = shop_id
                self.shops[index] = updated
                return {"success": True, "data": copy.deepcopy(updated), "status_code": 200}
        return {"success": False, "error": "Shop not found", "status_code": 404}

    def delete_shop(self, shop_id):
        self.calls.append(('delete', shop_id))
        if 'delete' in self.failing:
            return self._failure('delete')
        self.shops = [shop for shop in self.shops if shop.get('id') != shop_id]
        return {"success": True, "data": {"message": "Shop deleted successfully"}, "status_code": 200}

    def get_unique_values(self, kind):
        self.calls.append(('unique', kind))
        if 'unique' in self.failing:
            return self._failure('unique')
        return {"success": True, "data": list(self.locations.get(kind, [])), "status_code": 200}

    def count(self, operation):
        return sum(1 for call in self.calls if call[0] == operation)


class FakePincodeService:
    def __init__(self, results=None):
        self.results = results or {}
        self.calls = []

    def lookup(self, pincode):
        self.calls.append(pincode)
        return self.results.get(pincode, {"success": False, "error": "not found"})


def make_shop(shop_id, category='Electronics', state='Maharashtra', district='Pune',
              taluka='Haveli', village='Wagholi', **overrides):
    shop = {
        'id': shop_id,
        'businessCategory': category,
        'ownerName': 'Ravi Kumar',
        'shopName': f'Shop {shop_id}',
        'shopPhone': '9876543210',
        'email': f'{shop_id}@example.com',
        'website': '',
        'address': {
            'street': 'Main Road',
            'pincode': '412207',
            'village': village,
            'taluka': taluka,
            'district': district,
            'state': state,
            'country': 'India',
        },
    }
    shop.update(overrides)
    return shop


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return sched.scheduler(clock, clock.sleep)


@pytest.fixture
def advance(clock, scheduler):
    """Move the fake clock forward and fire whatever became due."""

    def _advance(seconds):
        clock.now += seconds
        scheduler.run(blocking=False)

    return _advance


@pytest.fixture
def notifier(scheduler):
    return NotificationQueue(scheduler, timeout=3)


@pytest.fixture
def api():
    return FakeDirectoryAPI()


@pytest.fixture
def pincode_service():
    return FakePincodeService({
        '411001': {
            "success": True,
            "provider": "primary",
            "address": {
                'village': 'Pune City',
                'taluka': 'Pune City',
                'district': 'Pune',
                'state': 'Maharashtra',
            },
        },
        '422001': {
            "success": True,
            "provider": "fallback",
            "address": {
                'village': '',
                'taluka': 'Nashik',
                'district': 'Nashik',
                'state': 'Maharashtra',
            },
        },
    })


@pytest.fixture
def workflow(api, pincode_service, notifier, scheduler):
    return RegistrationWorkflow(
        api=api,
        pincode_service=pincode_service,
        notifier=notifier,
        scheduler=scheduler,
        reset_delay=3,
    )


@pytest.fixture
def valid_step1():
    return {
        'businessCategory': 'Electronics',
        'ownerName': 'A B',
        'shopName': 'ShopX',
        'shopPhone': '9876543210',
        'email': 'a@b.com',
    }


@pytest.fixture
def fill(workflow):
    def _fill(values):
        for name, value in values.items():
            workflow.set_field(name, value)

    return _fill
