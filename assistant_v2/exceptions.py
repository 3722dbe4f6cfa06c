from __future__ import annotations

from typing import Iterable, Optional

import httpx


class MissingRequiredParameter(ValueError):
    def __init__(self, names: Iterable[str]) -> None:
        self.names = list(names)
        super().__init__(f'Missing required parameters: {", ".join(self.names)}')


class ApiError(RuntimeError):
    def __init__(self, code: int, message: str, http_response: Optional[httpx.Response] = None) -> None:
        self.code = code
        self.message = message
        self.http_response = http_response
        super().__init__(f'Error: {message}, Code: {code}')
