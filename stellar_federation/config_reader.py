import os

from pydantic_settings import BaseSettings, SettingsConfigDict

start_path = os.path.dirname(os.path.dirname(__file__)) + '/'
dotenv_path = os.path.join(start_path, '.env')


class Settings(BaseSettings):
    # total time for one HTTP request, seconds
    request_timeout: float = 10.0
    # aiohttp session is recreated after this many seconds
    max_session_duration: int = 3600
    user_agent: str = 'stellar-federation/0.1'
    # fetch stellar.toml over plain http, for local test servers only
    stellar_toml_use_http: bool = False
    log_level: str = 'INFO'

    model_config = SettingsConfigDict(
        env_file=dotenv_path,
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=False
    )


config: Settings = Settings()
