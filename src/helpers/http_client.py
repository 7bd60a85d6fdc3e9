"""
HTTP session factory.
Certificate validation stays on unless the caller opts out explicitly.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import requests


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpClientOptions:
    """Options for sessions created by create_session()."""
    timeout: float = 10.0
    allow_untrusted_certificates: bool = False
    user_agent: Optional[str] = None


class TimeoutSession(requests.Session):
    """Session that applies a default timeout to every request."""

    def __init__(self, timeout: float):
        super().__init__()
        self.timeout = timeout

    def request(self, method, url, **kwargs):
        kwargs.setdefault('timeout', self.timeout)
        return super().request(method, url, **kwargs)


def create_session(options: Optional[HttpClientOptions] = None) -> requests.Session:
    """
    Create a requests session.

    Args:
        options: Session options. If None, uses defaults (certificates verified)

    Returns:
        Configured session
    """
    options = options or HttpClientOptions()
    session = TimeoutSession(options.timeout)

    if options.user_agent:
        session.headers['User-Agent'] = options.user_agent

    if options.allow_untrusted_certificates:
        logger.warning("TLS certificate validation is DISABLED for this session")
        session.verify = False

    return session
