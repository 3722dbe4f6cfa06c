from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from assistant_v2.config import settings
from assistant_v2.schemas import DetailedResponse, MessageInput
from assistant_v2.service import AssistantV2


APP_NAME = 'assistant-v2-mcp-adapter'

mcp = FastMCP(APP_NAME)


def _service() -> AssistantV2:
    return AssistantV2.from_settings(settings)


def _result(response: DetailedResponse) -> Dict[str, Any]:
    data = response.result
    if isinstance(data, dict):
        return data
    return {'status_code': response.status_code, 'data': data}


@mcp.tool()
async def assistant_health() -> Dict[str, Any]:
    """Report which Assistant service and API version this adapter talks to."""
    return {'ok': True, 'service_url': settings.service_url, 'version': settings.version}


@mcp.tool()
async def assistant_create_session(assistant_id: str) -> Dict[str, Any]:
    """Create a session; the reply carries its session_id."""
    return _result(await _service().create_session(assistant_id=assistant_id))


@mcp.tool()
async def assistant_delete_session(assistant_id: str, session_id: str) -> Dict[str, Any]:
    """Delete a session before it times out."""
    return _result(await _service().delete_session(assistant_id=assistant_id, session_id=session_id))


@mcp.tool()
async def assistant_message(
    assistant_id: str,
    session_id: str,
    text: str,
    context: Optional[Dict[str, Any]] = None,
    return_context: bool = False,
) -> Dict[str, Any]:
    """Send one user utterance to a session."""
    message_input: Dict[str, Any] = MessageInput(text=text).model_dump(exclude_none=True)
    if return_context:
        message_input['options'] = {'return_context': True}
    response = await _service().message(
        assistant_id=assistant_id,
        session_id=session_id,
        input=message_input,
        context=context,
    )
    return _result(response)


def main() -> None:
    logging.basicConfig(level=settings.log_level.upper())
    mcp.run()


if __name__ == '__main__':
    main()
