"""Shared fixtures: explicit settings and a recording mock transport."""

import httpx
import pytest

from afripay.common.config import AfripaySettings


ALL_SECRETS = {
    "wave_api_key": "wave_key",
    "om_client_id": "om_client",
    "om_client_secret": "om_secret",
    "om_callback_url": None,
    "paydunya_master_key": "master_key",
    "paydunya_private_key": "priv_key",
    "paydunya_token": "token_value",
    "paytech_api_key": "pt_key",
    "paytech_api_secret": "pt_secret",
}


class RecordingTransport(httpx.MockTransport):
    """Replays canned responses in order and keeps every request sent."""

    def __init__(self, *responses: httpx.Response | Exception) -> None:
        self.requests: list[httpx.Request] = []
        self._responses = list(responses)
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def make_settings():
    def factory(**overrides) -> AfripaySettings:
        return AfripaySettings(_env_file=None, **{**ALL_SECRETS, **overrides})

    return factory


@pytest.fixture
def recorder():
    return RecordingTransport
