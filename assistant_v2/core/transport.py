from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from assistant_v2.core.authenticators import Authenticator
from assistant_v2.exceptions import ApiError
from assistant_v2.schemas import DetailedResponse, RequestDescriptor

logger = logging.getLogger(__name__)


class AsyncTransport:
    """Sends a RequestDescriptor over httpx.

    A fresh AsyncClient is opened per request unless ``client`` is given.
    """

    def __init__(
        self,
        timeout: float = 20.0,
        *,
        verify: bool = True,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.timeout = timeout
        self.verify = verify
        self.client = client

    async def send(self, service_url: str, descriptor: RequestDescriptor, authenticator: Authenticator) -> DetailedResponse:
        headers = dict(descriptor.headers)
        authenticator.authenticate(headers)
        url = f'{service_url.rstrip("/")}{descriptor.render_path()}'
        logger.debug('sending %s %s', descriptor.method, url)

        if self.client is not None:
            response = await self._request(self.client, url, descriptor, headers)
        else:
            async with httpx.AsyncClient(timeout=self.timeout, verify=self.verify) as client:
                response = await self._request(client, url, descriptor, headers)

        if response.status_code >= 400:
            message = _error_message(response)
            logger.warning('%s %s failed (%s): %s', descriptor.method, descriptor.path, response.status_code, message)
            raise ApiError(response.status_code, message, http_response=response)

        return DetailedResponse(
            status_code=response.status_code,
            result=_decode_result(response),
            headers=dict(response.headers),
        )

    @staticmethod
    async def _request(client: httpx.AsyncClient, url: str, descriptor: RequestDescriptor, headers: dict) -> httpx.Response:
        return await client.request(
            method=descriptor.method,
            url=url,
            params=descriptor.query,
            json=descriptor.body,
            headers=headers,
        )


def _decode_result(response: httpx.Response) -> Optional[Any]:
    if not response.content:
        return None
    content_type = response.headers.get('content-type', '')
    if 'json' not in content_type:
        return None
    return response.json()


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(data, dict):
        for key in ('error', 'message', 'errorMessage'):
            if isinstance(data.get(key), str):
                return data[key]
        errors = data.get('errors')
        if isinstance(errors, list) and errors and isinstance(errors[0], dict) and 'message' in errors[0]:
            return str(errors[0]['message'])
    return response.reason_phrase
