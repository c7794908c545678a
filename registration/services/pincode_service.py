import requests
import logging
from django.conf import settings

from registration.form_schema import PINCODE_PATTERN
from registration.utils import to_title_case

logger = logging.getLogger(__name__)

LOOKUP_FIELDS = ('village', 'taluka', 'district', 'state')


class PincodeLookupService:
    """Resolves a 6-digit PIN code to village/taluka/district/state.

    The primary provider answers with a list whose first element carries a
    ``Status`` flag and a ``PostOffice`` list. When it fails in any way the
    fallback provider is asked exactly once; it answers with a flat
    ``success`` flag and a ``data`` object.
    """

    def __init__(self, primary_url=None, fallback_url=None, timeout=None):
        self.primary_url = (primary_url or settings.PINCODE_PRIMARY_URL).rstrip('/')
        self.fallback_url = (fallback_url or settings.PINCODE_FALLBACK_URL).rstrip('/')
        self.timeout = timeout or settings.PINCODE_TIMEOUT

    def _get_json(self, url):
        logger.info(f"PIN code lookup request: GET {url}")
        response = requests.get(url, timeout=self.timeout)
        logger.info(f"PIN code lookup response status: {response.status_code}")
        response.raise_for_status()
        return response.json()

    def _query_primary(self, pincode):
        data = self._get_json(f"{self.primary_url}/{pincode}")

        result = data[0]
        if result.get('Status') != 'Success' or not result.get('PostOffice'):
            raise ValueError(f"primary provider returned no location for {pincode}")

        post_office = result['PostOffice'][0]
        return {
            'village': post_office.get('Name'),
            'taluka': post_office.get('Block'),
            'district': post_office.get('District'),
            'state': post_office.get('State'),
        }

    def _query_fallback(self, pincode):
        data = self._get_json(f"{self.fallback_url}/{pincode}")

        if not data.get('success') or not data.get('data'):
            raise ValueError(f"fallback provider returned no location for {pincode}")

        location = data['data']
        return {
            'village': location.get('village'),
            'taluka': location.get('block'),
            'district': location.get('district'),
            'state': location.get('state'),
        }

    @staticmethod
    def _normalize(address):
        return {
            field: to_title_case((address.get(field) or '').strip())
            for field in LOOKUP_FIELDS
        }

    def lookup(self, pincode):
        if not isinstance(pincode, str) or not PINCODE_PATTERN.fullmatch(pincode):
            return {"success": False, "error": "PIN code must be exactly 6 digits"}

        providers = (
            ("primary", self._query_primary),
            ("fallback", self._query_fallback),
        )
        errors = []
        for name, query in providers:
            try:
                address = query(pincode)
            except (requests.RequestException, ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
                logger.warning(f"PIN code lookup via {name} provider failed for {pincode}: {e}")
                errors.append(f"{name}: {e}")
                continue

            return {
                "success": True,
                "provider": name,
                "address": self._normalize(address),
            }

        logger.error(f"PIN code lookup failed for {pincode}")
        return {"success": False, "error": "; ".join(errors)}
