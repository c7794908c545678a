"""Client-side filtering of the fetched retailer list.

``category`` is a case-insensitive exact match on the business category; the
four location criteria are case-insensitive substring matches on the
corresponding address field. All active criteria must match.
"""
import logging

from django.conf import settings

from registration.utils import get_value

logger = logging.getLogger(__name__)

FILTER_FIELDS = ('category', 'state', 'district', 'taluka', 'village')

FIELD_SOURCES = {
    'category': 'businessCategory',
    'state': 'address.state',
    'district': 'address.district',
    'taluka': 'address.taluka',
    'village': 'address.village',
}

EXACT_MATCH_FIELDS = ('category',)


def empty_criteria():
    return {field: '' for field in FILTER_FIELDS}


def active_criteria(criteria):
    return {
        field: criteria[field]
        for field in FILTER_FIELDS
        if criteria.get(field)
    }


def matches(record, criteria):
    for field, value in active_criteria(criteria).items():
        needle = str(value).lower()
        haystack = str(get_value(record, FIELD_SOURCES[field]) or '').lower()

        if field in EXACT_MATCH_FIELDS:
            if haystack != needle:
                return False
        elif needle not in haystack:
            return False
    return True


def apply_filters(records, criteria):
    records = list(records)
    if not active_criteria(criteria):
        return records
    return [record for record in records if matches(record, criteria)]


class DebouncedFilter:
    """Holds the record set and the five criteria, recomputing results on change.

    Non-empty input is applied only after ``delay`` seconds without another
    change to the same field; clearing a field applies at once.
    """

    def __init__(self, scheduler, delay=None, on_change=None):
        self.scheduler = scheduler
        self.delay = settings.FILTER_DEBOUNCE_SECONDS if delay is None else delay
        self.on_change = on_change
        self.records = []
        self.raw = empty_criteria()
        self.applied = empty_criteria()
        self.results = []
        self.recompute_count = 0
        self._pending = {}

    @property
    def is_filtered(self):
        return bool(active_criteria(self.applied))

    def set_records(self, records):
        self.records = list(records)
        self.recompute()

    def set_criterion(self, field, value):
        if field not in FILTER_FIELDS:
            raise ValueError(f"Unknown filter field: {field}")

        value = value or ''
        self.raw[field] = value
        self._cancel(field)

        if not value:
            self._apply(field, value)
        else:
            self._pending[field] = self.scheduler.enter(
                self.delay, 1, self._apply, argument=(field, value)
            )

    def clear(self):
        self.cancel_pending()
        self.raw = empty_criteria()
        if self.is_filtered:
            self.applied = empty_criteria()
            self.recompute()

    def cancel_pending(self):
        for field in list(self._pending):
            self._cancel(field)

    def recompute(self):
        self.results = apply_filters(self.records, self.applied)
        self.recompute_count += 1
        logger.debug(f"Filtered {len(self.records)} shops down to {len(self.results)}")
        if self.on_change is not None:
            self.on_change(self.results)

    def _cancel(self, field):
        event = self._pending.pop(field, None)
        if event is not None:
            self.scheduler.cancel(event)

    def _apply(self, field, value):
        self._pending.pop(field, None)
        if self.applied[field] == value:
            return
        self.applied[field] = value
        self.recompute()
