from __future__ import annotations

import asyncio
import json
import os

from mcp_server import server


def _pretty(title: str, data: object) -> None:
    print(f'\n=== {title} ===')
    print(json.dumps(data, ensure_ascii=False, indent=2))


async def main() -> None:
    assistant_id = os.getenv('ASSISTANT_ID')
    if not assistant_id:
        raise RuntimeError('set ASSISTANT_ID to the assistant to talk to')

    health = await server.assistant_health()
    _pretty('health', health)

    session = await server.assistant_create_session(assistant_id=assistant_id)
    _pretty('session', session)

    session_id = session.get('session_id')
    if session_id is None:
        raise RuntimeError('create session response missing session_id')

    try:
        for text in ('Hello', 'What can you do?'):
            reply = await server.assistant_message(
                assistant_id=assistant_id,
                session_id=session_id,
                text=text,
                return_context=True,
            )
            _pretty(f'message: {text}', reply)
    finally:
        deleted = await server.assistant_delete_session(assistant_id=assistant_id, session_id=session_id)
        _pretty('delete', deleted)


if __name__ == '__main__':
    asyncio.run(main())
