"""
FolioDash Flask extension.

Copies configuration onto the app, builds the content API client, and
registers the enabled feature blueprints.
"""

import os

from flask import current_app
from jinja2 import ChoiceLoader, FileSystemLoader

from .core.api_client import ApiClient
from .core.config import Config
from .core.logging_service import LoggingService

DEFAULT_FEATURES = {
    'portfolio': True,
    'signup': True,
    'ops': True,
}

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'templates')


class FolioDash:
    """
    Usage:
        app = Flask(__name__)
        FolioDash(app, {'features': {'signup': False}})
    """

    def __init__(self, app=None, config=None):
        self._config = dict(config or {})
        self._registered = []
        self._api_client = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        for key in Config.APP_CONFIG_KEYS:
            if app.config.get(key) is None:
                app.config[key] = getattr(Config, key)

        self._add_template_dir(app)
        self._register_modules(app)

        @app.context_processor
        def inject_foliodash():
            return {
                'foliodash_config': self._config,
                'brand_name': app.config.get('BRAND_NAME') or 'Foliodash',
                'portfolio_listing_path': app.config.get('PORTFOLIO_LISTING_PATH', '/portfolio'),
            }

        app.extensions['foliodash'] = self

        if not app.config.get('API_BASE_URI'):
            LoggingService.warning('foliodash', 'API_BASE_URI is not configured; forms cannot reach the API')

    @property
    def features(self):
        features = dict(DEFAULT_FEATURES)
        features.update(self._config.get('features') or {})
        return features

    def _add_template_dir(self, app):
        """Shared layout templates, searched after the app's own"""
        loaders = [app.jinja_loader] if app.jinja_loader is not None else []
        app.jinja_loader = ChoiceLoader(loaders + [FileSystemLoader(TEMPLATE_DIR)])

    def _register_modules(self, app):
        features = self.features

        if features.get('portfolio'):
            from .modules.portfolio import portfolio_bp
            app.register_blueprint(portfolio_bp)
            self._registered.append('portfolio')

        if features.get('signup'):
            from .modules.signup import signup_bp
            app.register_blueprint(signup_bp)
            self._registered.append('signup')

        if features.get('ops'):
            from .modules.ops import ops_health_bp
            app.register_blueprint(ops_health_bp)
            self._registered.append('ops')

    def get_registered_modules(self):
        return list(self._registered)

    def get_api_client(self):
        """ApiClient for the current app's API_BASE_URI and API_TIMEOUT.

        Raises:
            ConfigurationError: when API_BASE_URI is empty.
        """
        base_uri = current_app.config.get('API_BASE_URI')
        timeout = current_app.config.get('API_TIMEOUT') or 15
        client = self._api_client
        if client is None or client.base_uri != (base_uri or '').rstrip('/') or client.timeout != timeout:
            client = ApiClient(base_uri, timeout=timeout)
            self._api_client = client
        return client
