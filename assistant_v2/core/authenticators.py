from __future__ import annotations

import base64
from typing import Dict, Protocol

from assistant_v2.config import Settings


class Authenticator(Protocol):
    auth_type: str

    def authenticate(self, headers: Dict[str, str]) -> None:
        ...


class NoAuthAuthenticator:
    auth_type = 'noauth'

    def authenticate(self, headers: Dict[str, str]) -> None:
        return None


class BearerTokenAuthenticator:
    auth_type = 'bearertoken'

    def __init__(self, bearer_token: str) -> None:
        if not bearer_token:
            raise ValueError('bearer_token must be set')
        self.bearer_token = bearer_token

    def authenticate(self, headers: Dict[str, str]) -> None:
        headers['Authorization'] = f'Bearer {self.bearer_token}'


class BasicAuthenticator:
    auth_type = 'basic'

    def __init__(self, username: str, password: str) -> None:
        if not username or not password:
            raise ValueError('username and password must be set')
        for value in (username, password):
            if _has_bad_first_or_last_char(value):
                raise ValueError('username and password must not start or end with curly brackets or quotes')
        self.username = username
        self.password = password

    def authenticate(self, headers: Dict[str, str]) -> None:
        token = base64.b64encode(f'{self.username}:{self.password}'.encode('utf-8')).decode('ascii')
        headers['Authorization'] = f'Basic {token}'


def _has_bad_first_or_last_char(value: str) -> bool:
    return value[0] in '{"' or value[-1] in '}"'


def get_authenticator_from_settings(settings: Settings) -> Authenticator:
    auth_type = settings.auth_type.lower()
    if auth_type == 'noauth':
        return NoAuthAuthenticator()
    if auth_type == 'bearertoken':
        return BearerTokenAuthenticator(settings.bearer_token)
    if auth_type == 'basic':
        return BasicAuthenticator(settings.username, settings.password)
    raise ValueError(f'unsupported auth_type: {settings.auth_type}')
