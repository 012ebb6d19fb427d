"""
Content API Client
==================

Thin wrapper over the remote content API used by the dashboard forms.
The API origin is passed in at construction; nothing here reads the environment.
"""

import requests

from .errors import ConfigurationError, RequestFailure
from .logging_service import LoggingService

DEFAULT_TIMEOUT = 15


class ApiClient:
    """HTTP client for the content API (categories, portfolio items, signup)."""

    def __init__(self, base_uri, timeout=DEFAULT_TIMEOUT):
        if not base_uri:
            raise ConfigurationError('API_BASE_URI is not configured')
        self.base_uri = base_uri.rstrip('/')
        self.timeout = timeout

    def url(self, path):
        return f"{self.base_uri}/{path.lstrip('/')}"

    def _request(self, method, path, **kwargs):
        """Send one request and return the decoded JSON body.

        Raises:
            RequestFailure: on transport errors, HTTP error statuses or a body
                that is not JSON.
        """
        url = self.url(path)
        status_code = None
        try:
            resp = requests.request(method, url, timeout=self.timeout, **kwargs)
            status_code = resp.status_code
            resp.raise_for_status()
            data = resp.json() if resp.content else {}
        except requests.RequestException as e:
            payload = {}
            response = getattr(e, 'response', None)
            if response is not None:
                status_code = response.status_code
                try:
                    payload = response.json()
                except ValueError:
                    payload = {}
            LoggingService.log_api_call('api', path, method, status_code, {'error': str(e)})
            raise RequestFailure(f'{method} {path} failed: {e}', status_code, payload) from e

        LoggingService.log_api_call('api', path, method, status_code)
        return data

    # ===== Reference data =====

    def get_categories(self):
        """Return the list of category records."""
        data = self._request('GET', '/category')
        return _envelope(data, 'allCategories')

    def get_portfolio_list(self):
        """Return the list of existing portfolio records."""
        data = self._request('GET', '/portfolio/portfolioLists')
        # Key spelling is the API's own
        return _envelope(data, 'PorfolioList')

    # ===== Writes =====

    def add_portfolio(self, parts):
        """Create a portfolio item from multipart ``parts``."""
        return self._request('POST', '/portfolio/addportfolio', files=parts)

    def update_portfolio(self, parts):
        """Update a portfolio item; ``parts`` must include ``_id``."""
        return self._request('PUT', '/portfolio/updatePortfolio', files=parts)

    def signup(self, payload):
        """Register a new user account from a JSON payload."""
        return self._request('POST', '/signup/add', json=payload)


def _envelope(data, key):
    """Pull a list out of a response envelope; anything unexpected is empty."""
    if not isinstance(data, dict):
        return []
    value = data.get(key)
    return value if isinstance(value, list) else []
