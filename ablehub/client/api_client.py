import logging
import requests
from ablehub.client.flags import AccessibilityFlags

logger = logging.getLogger(__name__)


class SettingsClientError(Exception):
    def __init__(self, message, status_code=0):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class SettingsApiClient:
    """GET/PUT /api/accessibility için ince requests sarmalayıcısı."""

    def __init__(self, base_url, token=None, user_id=None, timeout=10, session=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({'Accept': 'application/json'})
        if token:
            self.session.headers['Authorization'] = f'Bearer {token}'
        if user_id:
            self.session.headers['X-User-Id'] = user_id

    @property
    def url(self):
        return f"{self.base_url}/api/accessibility"

    def fetch(self):
        r = self._request('GET', "Failed to fetch settings")
        return self._decode(r, "Failed to fetch settings")

    def save(self, flags):
        r = self._request('PUT', "Failed to save settings", json=flags.to_payload())
        return self._decode(r, "Failed to save settings")

    @staticmethod
    def _decode(r, failure):
        try:
            return AccessibilityFlags.from_payload(r.json())
        except (KeyError, TypeError, ValueError) as e:
            raise SettingsClientError(f"{failure}: invalid response body ({e})", r.status_code) from e

    def _request(self, method, failure, **kwargs):
        try:
            r = self.session.request(method, self.url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise SettingsClientError(f"{failure}: {e}") from e

        if not r.ok:
            msg = r.reason or ''
            try:
                body = r.json()
                if isinstance(body, dict) and body.get('error'):
                    msg = body['error']
            except ValueError:
                pass
            raise SettingsClientError(f"{failure}: {r.status_code} {msg}".rstrip(), r.status_code)
        return r
