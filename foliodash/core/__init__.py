"""
Foliodash Core
==============

Configuration, API client, validation, form state and logging shared by the
form modules.
"""

from .api_client import ApiClient
from .config import Config
from .errors import ConfigurationError, FolioDashError, RequestFailure, ValidationFailure
from .logging_service import LoggingService, logger

__all__ = [
    'ApiClient', 'Config', 'ConfigurationError', 'FolioDashError',
    'LoggingService', 'RequestFailure', 'ValidationFailure', 'logger',
]
