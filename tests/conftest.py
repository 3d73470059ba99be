import json
import pytest
import sys
from pathlib import Path
from unittest.mock import Mock

import requests

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

API_URL = "https://api.cronofy.com/v1"
NEXT_PAGE_URL = "https://next.page.com/08a07b034306679e"
ACCESS_TOKEN = "token_123"


def build_response(status_code=200, body=None, url=None, content=None):
    """Build a real requests.Response carrying a JSON body."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json; charset=utf-8"
    if content is not None:
        response._content = content
    elif body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = b""
    return response


@pytest.fixture
def make_response():
    """Factory for requests.Response objects."""
    return build_response


@pytest.fixture
def mock_session():
    """Mock HTTP session; tests set request.return_value or use route_responses."""
    return Mock(spec=requests.Session)


@pytest.fixture
def route_responses(mock_session):
    """
    Route session requests by (method, url) to prepared responses.

    Unrouted requests fail the test with a 599 so an unexpected page fetch
    cannot go unnoticed.
    """
    def _route(routes):
        def _request(method, url, **kwargs):
            status_code, body = routes.get((method, url), (599, {"error": "unexpected request"}))
            return build_response(status_code, body, url=url)
        mock_session.request.side_effect = _request
        return mock_session
    return _route


@pytest.fixture
def client(mock_session):
    """Client wired to the mock session."""
    from cronofy_api_client import CronofyClient
    return CronofyClient(
        client_id="client_id_123",
        client_secret="client_secret_456",
        access_token=ACCESS_TOKEN,
        refresh_token="refresh_token_456",
        session=mock_session,
    )


@pytest.fixture
def sample_calendars_response():
    """Sample /calendars response."""
    return {
        "calendars": [
            {
                "provider_name": "google",
                "profile_name": "example@cronofy.com",
                "calendar_id": "cal_n23kjnwrw2_jsdfjksn234",
                "calendar_name": "Home",
                "calendar_readonly": False,
                "calendar_deleted": False
            },
            {
                "provider_name": "google",
                "profile_name": "example@cronofy.com",
                "calendar_id": "cal_n23kjnwrw2_n1k323nkj23",
                "calendar_name": "Work",
                "calendar_readonly": True,
                "calendar_deleted": True
            },
            {
                "provider_name": "apple",
                "profile_name": "example@cronofy.com",
                "calendar_id": "cal_n23kjnwrw2_3nkj23wejk1",
                "calendar_name": "Bank Holidays",
                "calendar_readonly": True,
                "calendar_deleted": False
            }
        ]
    }


@pytest.fixture
def sample_events_first_page():
    """First page of a two page /events response."""
    return {
        "pages": {
            "current": 1,
            "total": 2,
            "next_page": NEXT_PAGE_URL
        },
        "events": [
            {
                "calendar_id": "cal_U9uuErStTG@EAAAB_IsAsykA2DBTWqQTf-f0kJw",
                "event_uid": "evt_external_54008b1a4a41730f8d5c6037",
                "summary": "Company Retreat",
                "description": "",
                "start": "2014-09-06",
                "end": "2014-09-08",
                "deleted": False
            },
            {
                "calendar_id": "cal_U9uuErStTG@EAAAB_IsAsykA2DBTWqQTf-f0kJw",
                "event_uid": "evt_external_54008b1a4a41730f8d5c6038",
                "summary": "Dinner with Laura",
                "description": "",
                "start": "2014-09-13T19:00:00Z",
                "end": "2014-09-13T21:00:00Z",
                "deleted": False,
                "location": {
                    "description": "Pizzeria"
                }
            }
        ]
    }


@pytest.fixture
def sample_events_second_page():
    """Last page of a two page /events response."""
    return {
        "pages": {
            "current": 2,
            "total": 2
        },
        "events": [
            {
                "calendar_id": "cal_U9uuErStTG@EAAAB_IsAsykA2DBTWqQTf-f0kJw",
                "event_uid": "evt_external_54008b1a4a4173023402934d",
                "summary": "Company Retreat Extended",
                "description": "",
                "start": "2014-09-06",
                "end": "2014-09-08",
                "deleted": False
            },
            {
                "calendar_id": "cal_U9uuErStTG@EAAAB_IsAsykA2DBTWqQTf-f0kJw",
                "event_uid": "evt_external_54008b1a4a41198273921312",
                "summary": "Dinner with Paul",
                "description": "",
                "start": "2014-09-13T19:00:00Z",
                "end": "2014-09-13T21:00:00Z",
                "deleted": False,
                "location": {
                    "description": "Cafe"
                }
            }
        ]
    }


@pytest.fixture
def sample_free_busy_first_page():
    """First page of a two page /free_busy response."""
    return {
        "pages": {
            "current": 1,
            "total": 2,
            "next_page": NEXT_PAGE_URL
        },
        "free_busy": [
            {
                "calendar_id": "cal_U9uuErStTG@EAAAB_IsAsykA2DBTWqQTf-f0kJw",
                "start": "2014-09-06",
                "end": "2014-09-08",
                "free_busy_status": "busy"
            },
            {
                "calendar_id": "cal_U9uuErStTG@EAAAB_IsAsykA2DBTWqQTf-f0kJw",
                "start": "2014-09-13T19:00:00Z",
                "end": "2014-09-13T21:00:00Z",
                "free_busy_status": "tentative"
            }
        ]
    }


@pytest.fixture
def sample_free_busy_second_page():
    """Last page of a two page /free_busy response."""
    return {
        "pages": {
            "current": 2,
            "total": 2
        },
        "free_busy": [
            {
                "calendar_id": "cal_U9uuErStTG@EAAAB_IsAsykA2DBTWqQTf-f0kJw",
                "start": "2014-09-07",
                "end": "2014-09-09",
                "free_busy_status": "busy"
            },
            {
                "calendar_id": "cal_U9uuErStTG@EAAAB_IsAsykA2DBTWqQTf-f0kJw",
                "start": "2014-09-14T19:00:00Z",
                "end": "2014-09-14T21:00:00Z",
                "free_busy_status": "tentative"
            }
        ]
    }


@pytest.fixture
def sample_channels_response():
    """Sample /channels response."""
    return {
        "channels": [
            {
                "channel_id": "channel_id_123",
                "callback_url": "http://call.back/url",
                "filters": {}
            },
            {
                "channel_id": "channel_id_456",
                "callback_url": "http://call.back/url2",
                "filters": {}
            }
        ]
    }


@pytest.fixture
def sample_profiles_response():
    """Sample /profiles response."""
    return {
        "profiles": [
            {
                "provider_name": "google",
                "profile_id": "pro_n23kjnwrw2",
                "profile_name": "example@cronofy.com",
                "profile_connected": True
            },
            {
                "provider_name": "apple",
                "profile_id": "pro_n23kjnwrw2",
                "profile_name": "example@cronofy.com",
                "profile_connected": False,
                "profile_relink_url": "http://to.cronofy.com/RaNggYu"
            }
        ]
    }


@pytest.fixture
def sample_account_response():
    """Sample /account response."""
    return {
        "account": {
            "account_id": "acc_id_123",
            "email": "foo@example.com"
        }
    }
