from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Functions Telemetry Enricher'
    VERSION: str = '0.1.0'
    DEBUG: bool = False

    # Used for log context only; role identity comes from WEBSITE_* at call time
    SERVICE_NAME: str = 'functions-host'

    # Request normalization
    SDK_VERSION: str = '0.0.0'
    PLACEHOLDER_HOST: str = 'hello-world'

    # Role environment
    PLACEHOLDER_SLOT_IDENTITY: str = 'hello-world'
    DEFAULT_SLOT_NAME: str = 'production'
    NODE_NAME_SUFFIX: str = '.azurewebsites.net'
    DEFAULT_IP: str = '0.0.0.0'

    # Activity tags with this prefix are library-internal
    RESERVED_TAG_PREFIX: str = 'ai_'

    @field_validator('NODE_NAME_SUFFIX', mode='before')
    @classmethod
    def ensure_leading_dot(cls, v: str) -> str:
        if isinstance(v, str) and v and not v.startswith('.'):
            return f'.{v}'
        return v


settings = Settings()  # type: ignore
