"""Utility components for cricmirror."""

from cricmirror.utils.files import get_project_root, snapshot_filename
from cricmirror.utils.headers import DEFAULT_USER_AGENT, HeaderGenerator, UserAgentRotator
from cricmirror.utils.logging import setup_local_logging
from cricmirror.utils.urls import absolutize, is_absolute, resolve_page_url

__all__ = [
    'DEFAULT_USER_AGENT',
    'HeaderGenerator',
    'UserAgentRotator',
    'absolutize',
    'get_project_root',
    'is_absolute',
    'resolve_page_url',
    'setup_local_logging',
    'snapshot_filename',
]
