from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    service_url: str = Field(default='https://gateway.watsonplatform.net/assistant/api', alias='ASSISTANT_URL')
    version: str = Field(default='2018-10-18', alias='ASSISTANT_VERSION')

    auth_type: str = Field(default='noauth', alias='ASSISTANT_AUTH_TYPE')  # noauth|bearertoken|basic
    bearer_token: str = Field(default='', alias='ASSISTANT_BEARER_TOKEN')
    username: str = Field(default='', alias='ASSISTANT_USERNAME')
    password: str = Field(default='', alias='ASSISTANT_PASSWORD')

    timeout_seconds: float = Field(default=20.0, alias='ASSISTANT_TIMEOUT_SECONDS')
    disable_ssl_verification: bool = Field(default=False, alias='ASSISTANT_DISABLE_SSL')
    log_level: str = Field(default='INFO', alias='ASSISTANT_LOG_LEVEL')


settings = Settings()
