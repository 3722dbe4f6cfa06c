from __future__ import annotations

import logging
import platform
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from pydantic import BaseModel

from assistant_v2.exceptions import MissingRequiredParameter
from assistant_v2.schemas import (
    CreateSessionOptions,
    DeleteSessionOptions,
    MessageOptions,
    OperationOptions,
    RequestDescriptor,
)

logger = logging.getLogger(__name__)

SDK_NAME = 'assistant-v2-python'
SDK_VERSION = '0.1.0'
SERVICE_NAME = 'conversation'
SERVICE_VERSION = 'V2'
JSON_MEDIA_TYPE = 'application/json'


@dataclass(frozen=True)
class Operation:
    operation_id: str
    method: str
    path: str
    options_model: Type[OperationOptions]
    path_params: Tuple[str, ...]
    body_fields: Tuple[str, ...] = ()
    content_type: Optional[str] = None


OPERATIONS: Dict[str, Operation] = {
    op.operation_id: op
    for op in (
        Operation(
            operation_id='createSession',
            method='POST',
            path='/v2/assistants/{assistant_id}/sessions',
            options_model=CreateSessionOptions,
            path_params=('assistant_id',),
        ),
        Operation(
            operation_id='deleteSession',
            method='DELETE',
            path='/v2/assistants/{assistant_id}/sessions/{session_id}',
            options_model=DeleteSessionOptions,
            path_params=('assistant_id', 'session_id'),
        ),
        Operation(
            operation_id='message',
            method='POST',
            path='/v2/assistants/{assistant_id}/sessions/{session_id}/message',
            options_model=MessageOptions,
            path_params=('assistant_id', 'session_id'),
            body_fields=('input', 'context'),
            content_type=JSON_MEDIA_TYPE,
        ),
    )
}


def get_missing_params(params: Mapping[str, Any], model: Type[BaseModel]) -> List[str]:
    return [name for name, info in model.model_fields.items() if info.is_required() and params.get(name) is None]


def merge_headers(*layers: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """Merge header maps left to right; later layers win, names compare case-insensitively."""
    merged: Dict[str, str] = {}
    for layer in layers:
        for name, value in (layer or {}).items():
            for existing in [k for k in merged if k.lower() == name.lower()]:
                del merged[existing]
            merged[name] = value
    return merged


def get_sdk_headers(operation_id: str) -> Dict[str, str]:
    return {
        'User-Agent': f'{SDK_NAME}/{SDK_VERSION} (python {platform.python_version()}; {platform.system()})',
        'X-IBMCloud-SDK-Analytics': (
            f'service_name={SERVICE_NAME};service_version={SERVICE_VERSION};operation_id={operation_id}'
        ),
    }


def _to_json(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True)
    return value


class RequestBuilder:
    def __init__(self, version: str, default_headers: Optional[Mapping[str, str]] = None) -> None:
        self.version = version
        self.default_headers = dict(default_headers or {})

    def build(self, operation_id: str, params: Mapping[str, Any]) -> RequestDescriptor:
        operation = OPERATIONS[operation_id]
        supplied = {name: value for name, value in params.items() if value is not None}

        missing = get_missing_params(supplied, operation.options_model)
        if missing:
            raise MissingRequiredParameter(missing)
        options = operation.options_model.model_validate(supplied)

        body: Optional[Dict[str, Any]] = None
        if operation.body_fields:
            body = {}
            for name in operation.body_fields:
                value = getattr(options, name)
                if value is not None:
                    body[name] = _to_json(value)

        media_headers = {'Accept': JSON_MEDIA_TYPE}
        if operation.content_type:
            media_headers['Content-Type'] = operation.content_type

        descriptor = RequestDescriptor(
            method=operation.method,
            path=operation.path,
            path_params={name: getattr(options, name) for name in operation.path_params},
            query={'version': self.version},
            body=body,
            headers=merge_headers(
                get_sdk_headers(operation.operation_id),
                self.default_headers,
                media_headers,
                options.headers,
            ),
        )
        logger.debug('built %s %s for %s', descriptor.method, descriptor.render_path(), operation_id)
        return descriptor
