"""Runtime settings for the extraction engine."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from cricmirror.utils.headers import DEFAULT_USER_AGENT

DEFAULT_BASE_URL = 'https://www.cricbuzz.com'
DEFAULT_TIMEOUT = 30.0


class MirrorSettings(BaseModel):
    """Settings shared by the fetcher and the extractor.

    Attributes:
        base_url: Origin every relative path and URL is resolved against
        timeout: Request timeout in seconds
        user_agent: Browser-like User-Agent sent with every request
        output_dir: Directory snapshots are saved to by the CLI

    """

    base_url: str = Field(default=DEFAULT_BASE_URL, description='Remote origin')
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description='Request timeout in seconds')
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description='User-Agent header value')
    output_dir: str = Field(default='extracted', description='Where saved snapshots go')

    @field_validator('base_url')
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip('/')

    @classmethod
    def from_env(cls) -> 'MirrorSettings':
        """Build settings from the environment, loading .env first.

        Reads CRICMIRROR_BASE_URL, CRICMIRROR_TIMEOUT, CRICMIRROR_USER_AGENT
        and CRICMIRROR_OUTPUT_DIR. Unset variables keep their defaults.

        Returns:
            Populated MirrorSettings

        """
        load_dotenv()

        env_map = {
            'base_url': 'CRICMIRROR_BASE_URL',
            'timeout': 'CRICMIRROR_TIMEOUT',
            'user_agent': 'CRICMIRROR_USER_AGENT',
            'output_dir': 'CRICMIRROR_OUTPUT_DIR',
        }
        values = {name: os.getenv(var) for name, var in env_map.items()}
        return cls(**{name: value for name, value in values.items() if value})
