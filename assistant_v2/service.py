from __future__ import annotations

from typing import Any, Dict, Optional

from assistant_v2.config import Settings, settings as default_settings
from assistant_v2.core.authenticators import Authenticator, get_authenticator_from_settings
from assistant_v2.core.request_builder import RequestBuilder
from assistant_v2.core.transport import AsyncTransport
from assistant_v2.schemas import DetailedResponse, RequestDescriptor


class AssistantV2:
    """Async client for the Assistant v2 sessions and message API.

    Every operation is a coroutine. Parameter validation happens inside the
    coroutine, so a missing parameter and a failed HTTP call are both raised
    when the result is awaited.
    """

    DEFAULT_SERVICE_URL = 'https://gateway.watsonplatform.net/assistant/api'

    def __init__(
        self,
        version: str,
        authenticator: Authenticator,
        service_url: Optional[str] = None,
        *,
        transport: Optional[AsyncTransport] = None,
    ) -> None:
        if not version:
            raise ValueError('version was not specified')
        if authenticator is None:
            raise ValueError('authenticator must be set')
        self.version = version
        self.authenticator = authenticator
        self.service_url = service_url or self.DEFAULT_SERVICE_URL
        self.transport = transport or AsyncTransport()
        self.default_headers: Dict[str, str] = {}

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None, *, transport: Optional[AsyncTransport] = None) -> 'AssistantV2':
        config = config or default_settings
        return cls(
            version=config.version,
            authenticator=get_authenticator_from_settings(config),
            service_url=config.service_url,
            transport=transport
            or AsyncTransport(timeout=config.timeout_seconds, verify=not config.disable_ssl_verification),
        )

    def set_service_url(self, service_url: str) -> None:
        if not service_url:
            raise ValueError('service_url must be set')
        self.service_url = service_url

    def set_default_headers(self, headers: Dict[str, str]) -> None:
        self.default_headers = dict(headers)

    async def create_request(self, descriptor: RequestDescriptor) -> DetailedResponse:
        return await self.transport.send(self.service_url, descriptor, self.authenticator)

    async def create_session(
        self,
        assistant_id: Optional[str] = None,
        *,
        headers: Optional[Dict[str, str]] = None,
    ) -> DetailedResponse:
        """Create a new session for ``assistant_id``."""
        return await self._call('createSession', assistant_id=assistant_id, headers=headers)

    async def delete_session(
        self,
        assistant_id: Optional[str] = None,
        session_id: Optional[str] = None,
        *,
        headers: Optional[Dict[str, str]] = None,
    ) -> DetailedResponse:
        return await self._call('deleteSession', assistant_id=assistant_id, session_id=session_id, headers=headers)

    async def message(
        self,
        assistant_id: Optional[str] = None,
        session_id: Optional[str] = None,
        input: Any = None,
        context: Any = None,
        *,
        headers: Optional[Dict[str, str]] = None,
    ) -> DetailedResponse:
        """Send user input to a session and return the assistant's reply.

        ``input`` and ``context`` are sent as given; MessageInput and
        MessageContext models are dumped without their unset fields.
        """
        return await self._call(
            'message',
            assistant_id=assistant_id,
            session_id=session_id,
            input=input,
            context=context,
            headers=headers,
        )

    async def _call(self, operation_id: str, **params: Any) -> DetailedResponse:
        builder = RequestBuilder(self.version, self.default_headers)
        descriptor = builder.build(operation_id, params)
        return await self.create_request(descriptor)
