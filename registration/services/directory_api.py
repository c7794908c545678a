import requests
import logging
from django.conf import settings

logger = logging.getLogger(__name__)

FILTER_PARAMS = ('category', 'state', 'district', 'taluka', 'village')
LOCATION_KINDS = ('states', 'districts', 'talukas', 'villages')


class DirectoryAPIService:
    """HTTP client for the Directory Service (``/api/shops`` and the distinct-value lists)."""

    def __init__(self, base_url=None, timeout=None, session=None):
        self.base_url = (base_url or settings.DIRECTORY_API_BASE_URL).rstrip('/')
        self.timeout = timeout or settings.DIRECTORY_API_TIMEOUT
        self.session = session or requests.Session()

    def make_request(self, method, endpoint, data=None, params=None):
        url = f"{self.base_url}{endpoint}"

        logger.info(f"Directory API Request: {method} {url}")
        if params:
            logger.debug(f"Params: {params}")

        try:
            response = self.session.request(
                method.upper(), url, json=data, params=params, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Directory API {method} {url} failed: {e}")
            return {"success": False, "error": str(e), "status_code": None}

        logger.info(f"Directory API Response Status: {response.status_code}")

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not response.ok:
            error = None
            if isinstance(payload, dict):
                error = payload.get("error")
            error = error or f"HTTP {response.status_code}"
            logger.error(f"Directory API {method} {url} returned {response.status_code}: {error}")
            return {"success": False, "error": error, "status_code": response.status_code}

        if payload is None:
            return {
                "success": False,
                "error": "Invalid JSON response",
                "status_code": response.status_code,
            }

        return {"success": True, "data": payload, "status_code": response.status_code}

    def list_shops(self, filters=None):
        params = {
            key: value for key, value in (filters or {}).items()
            if key in FILTER_PARAMS and value
        }
        return self.make_request("GET", "/shops", params=params or None)

    def create_shop(self, shop_data):
        return self.make_request("POST", "/shops", data=shop_data)

    def update_shop(self, shop_id, shop_data):
        return self.make_request("PUT", f"/shops/{shop_id}", data=shop_data)

    def delete_shop(self, shop_id):
        return self.make_request("DELETE", f"/shops/{shop_id}")

    def get_unique_values(self, kind):
        if kind not in LOCATION_KINDS:
            raise ValueError(f"Unknown location list: {kind}")
        return self.make_request("GET", f"/{kind}")
