"""
Foliodash Errors
================

Exception types shared by the form controllers and the API client.
"""


class FolioDashError(Exception):
    """Base class for every error raised by foliodash."""

    def __init__(self, message=None):
        self.message = message or ''
        super().__init__(self.message)


class ConfigurationError(FolioDashError):
    """Required configuration (such as the API origin) is missing."""


class RequestFailure(FolioDashError):
    """A call to the remote content API failed.

    Covers transport errors, non-2xx responses and undecodable bodies.
    ``payload`` holds the decoded error body when the server sent one.
    """

    def __init__(self, message=None, status_code=None, payload=None):
        super().__init__(message or 'Request failed')
        self.status_code = status_code
        self.payload = payload or {}

    @property
    def server_message(self):
        """The ``message`` field of the server's error body, if any."""
        if isinstance(self.payload, dict):
            return self.payload.get('message') or None
        return None


class ValidationFailure(FolioDashError):
    """One or more form fields failed their validation rules."""

    def __init__(self, errors):
        self.errors = dict(errors)
        super().__init__(', '.join(f'{field}: {msg}' for field, msg in self.errors.items()))
