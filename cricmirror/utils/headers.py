"""Manages realistic user agents and headers for fetching."""

import random

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)


class UserAgentRotator:
    """Manages a pool of realistic user agents.

    The remote rejects obvious non-browser clients, so every request
    carries one of these.

    Attributes:
        USER_AGENTS: A list of agents to fetch an HTML

    """

    USER_AGENTS = [
        DEFAULT_USER_AGENT,
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36',
        'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0',
        'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.1 Safari/605.1.15',
        'Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
    ]

    @classmethod
    def get_random(cls) -> str:
        """Get a random user agent.

        Returns:
            A random user agent to be used to fetch an HTML

        """
        return random.choice(cls.USER_AGENTS)


class HeaderGenerator:
    """Generates browser headers around a user agent."""

    @staticmethod
    def generate_headers(user_agent: str | None = None) -> dict[str, str]:
        """Generate browser headers.

        Args:
            user_agent: The user agent to send. Defaults to DEFAULT_USER_AGENT.

        Returns:
            The headers to be used to fetch an HTML

        """
        user_agent = user_agent or DEFAULT_USER_AGENT

        headers = {
            'User-Agent': user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.9',
        }

        # Chrome/Edge send Sec-Fetch-* on top-level navigations
        if 'Chrome' in user_agent:
            headers.update(
                {
                    'Sec-Fetch-Dest': 'document',
                    'Sec-Fetch-Mode': 'navigate',
                    'Sec-Fetch-Site': 'none',
                    'Sec-Fetch-User': '?1',
                }
            )

        return headers
