import copy
import sched
import time

from django.conf import settings


ADDRESS_FIELDS = ['street', 'pincode', 'village', 'taluka', 'district', 'state', 'country']
SERVER_OWNED_FIELDS = ('id', 'createdAt', 'updatedAt')


def to_title_case(value):
    """Capitalise each space-separated word, keeping the spacing the user typed."""
    if not isinstance(value, str):
        return value
    return " ".join(word[:1].upper() + word[1:].lower() for word in value.split(" "))


def get_value(record, name, default=''):
    """Read a dotted field name (e.g. ``address.pincode``) from a record dict."""
    current = record
    for part in name.split('.'):
        if not isinstance(current, dict):
            return default
        current = current.get(part)
        if current is None:
            return default
    return current


def set_value(record, name, value):
    parts = name.split('.')
    current = record
    for part in parts[:-1]:
        current = current.setdefault(part, {})
    current[parts[-1]] = value


def empty_address(country=None):
    address = {field: '' for field in ADDRESS_FIELDS}
    address['country'] = country if country is not None else settings.DEFAULT_COUNTRY
    return address


def empty_draft(category='', country=None):
    return {
        'businessCategory': category,
        'ownerName': '',
        'shopName': '',
        'shopPhone': '',
        'email': '',
        'website': '',
        'address': empty_address(country),
    }


def draft_from_record(record):
    """Working copy of a saved record with every draft key present."""
    draft = empty_draft()
    for key, value in copy.deepcopy(record).items():
        if key in SERVER_OWNED_FIELDS or key == 'address':
            continue
        draft[key] = '' if value is None else value

    address = record.get('address') or {}
    for field in ADDRESS_FIELDS:
        value = address.get(field)
        if value is not None:
            draft['address'][field] = value
    return draft


def make_scheduler():
    return sched.scheduler(time.monotonic, time.sleep)
