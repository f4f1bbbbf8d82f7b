import pytest
import requests
from ablehub.client.api_client import SettingsApiClient, SettingsClientError
from ablehub.client.flags import AccessibilityFlags

RECORD = {
    "id": "abc",
    "userId": "u1",
    "voiceNavigation": False,
    "screenReader": True,
    "highContrast": False,
    "largeText": False,
    "keyboardNav": True,
    "createdAt": "2026-01-01T00:00:00",
    "updatedAt": "2026-01-01T00:00:00",
}


class FakeResponse:
    def __init__(self, status_code=200, body=None, reason="OK"):
        self.status_code = status_code
        self._body = body
        self.reason = reason

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("no json")
        return self._body


class FakeSession:
    def __init__(self, response=None, error=None):
        self.headers = {}
        self.response = response
        self.error = error
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error:
            raise self.error
        return self.response


def test_fetch_parses_flags_and_sends_identity() -> None:
    session = FakeSession(FakeResponse(body=RECORD))
    api = SettingsApiClient("http://localhost:5001/", user_id="u1", session=session)

    flags = api.fetch()

    assert flags == AccessibilityFlags(screenReader=True, keyboardNav=True)
    method, url, _ = session.calls[0]
    assert (method, url) == ("GET", "http://localhost:5001/api/accessibility")
    assert session.headers["X-User-Id"] == "u1"


def test_save_sends_full_flag_set() -> None:
    session = FakeSession(FakeResponse(body=RECORD))
    api = SettingsApiClient("http://api", token="tkn", session=session)

    api.save(AccessibilityFlags(highContrast=True))

    method, _, kwargs = session.calls[0]
    assert method == "PUT"
    assert kwargs["json"] == {
        "voiceNavigation": False,
        "screenReader": False,
        "highContrast": True,
        "largeText": False,
        "keyboardNav": False,
    }
    assert session.headers["Authorization"] == "Bearer tkn"


def test_error_body_message_is_used() -> None:
    session = FakeSession(FakeResponse(401, {"error": "Unauthorized: No user ID provided"}, "UNAUTHORIZED"))
    with pytest.raises(SettingsClientError) as exc:
        SettingsApiClient("http://api", session=session).fetch()
    assert exc.value.status_code == 401
    assert exc.value.message == "Failed to fetch settings: 401 Unauthorized: No user ID provided"


def test_reason_used_when_body_is_not_json() -> None:
    session = FakeSession(FakeResponse(502, None, "Bad Gateway"))
    with pytest.raises(SettingsClientError) as exc:
        SettingsApiClient("http://api", session=session).save(AccessibilityFlags())
    assert exc.value.message == "Failed to save settings: 502 Bad Gateway"


def test_transport_failure_is_wrapped() -> None:
    session = FakeSession(error=requests.ConnectionError("refused"))
    with pytest.raises(SettingsClientError) as exc:
        SettingsApiClient("http://api", session=session).fetch()
    assert exc.value.status_code == 0
    assert "refused" in exc.value.message


@pytest.mark.parametrize("body", [None, ["not", "a", "record"], {"voiceNavigation": True}])
def test_unreadable_success_body_is_wrapped(body) -> None:
    session = FakeSession(FakeResponse(200, body))
    with pytest.raises(SettingsClientError) as exc:
        SettingsApiClient("http://api", session=session).save(AccessibilityFlags())
    assert exc.value.status_code == 200
    assert exc.value.message.startswith("Failed to save settings: invalid response body")
