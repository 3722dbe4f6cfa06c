from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field


HttpMethod = Literal['GET', 'POST', 'PUT', 'PATCH', 'DELETE']


class OperationOptions(BaseModel):
    """Base for per-operation parameters.

    Fields typed without a default are required; the service reports them
    as missing instead of letting the model raise.
    """

    model_config = ConfigDict(extra='forbid')

    headers: Dict[str, str] = Field(default_factory=dict)


class CreateSessionOptions(OperationOptions):
    assistant_id: str


class DeleteSessionOptions(OperationOptions):
    assistant_id: str
    session_id: str


class MessageOptions(OperationOptions):
    assistant_id: str
    session_id: str
    input: Any = None
    context: Any = None


class MessageInputOptions(BaseModel):
    debug: Optional[bool] = None
    restart: Optional[bool] = None
    alternate_intents: Optional[bool] = None
    return_context: Optional[bool] = None
    export: Optional[bool] = None


class MessageInput(BaseModel):
    message_type: Optional[Literal['text']] = 'text'
    text: Optional[str] = None
    options: Optional[MessageInputOptions] = None
    intents: Optional[List[Dict[str, Any]]] = None
    entities: Optional[List[Dict[str, Any]]] = None
    suggestion_id: Optional[str] = None


class MessageContext(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    global_: Optional[Dict[str, Any]] = Field(default=None, alias='global')
    skills: Optional[Dict[str, Any]] = None


class RequestDescriptor(BaseModel):
    method: HttpMethod
    path: str
    path_params: Dict[str, str] = Field(default_factory=dict)
    query: Dict[str, Any] = Field(default_factory=dict)
    body: Optional[Dict[str, Any]] = None
    headers: Dict[str, str] = Field(default_factory=dict)

    def render_path(self) -> str:
        return self.path.format(**{name: quote(value, safe='') for name, value in self.path_params.items()})


@dataclass(frozen=True)
class DetailedResponse:
    status_code: int
    result: Optional[Dict[str, Any]] = None
    headers: Dict[str, str] = field(default_factory=dict)
