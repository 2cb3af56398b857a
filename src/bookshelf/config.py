import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')


class ServerConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='BOOKSHELF_', frozen=True)

    host: str = 'localhost'
    port: int = 8000
    log_level: str = 'INFO'

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f'log_level must be one of {", ".join(_LOG_LEVELS)}')
        return level


def configure_logging(level: str = 'INFO'):
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
