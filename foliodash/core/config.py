import os
from dotenv import load_dotenv

load_dotenv(override=True)

class Config:
    """
    Base configuration for the foliodash dashboard.
    Deployments provide the content API origin via environment variables.
    """
    # Flask settings
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY')

    # Remote content API
    API_BASE_URI = os.getenv('API_BASE_URI', '')
    API_TIMEOUT = float(os.getenv('API_TIMEOUT', '15'))

    # Where the forms send the browser after a successful submit
    PORTFOLIO_LISTING_PATH = os.getenv('PORTFOLIO_LISTING_PATH', '/portfolio')
    SIGNUP_REDIRECT_PATH = os.getenv('SIGNUP_REDIRECT_PATH', '/login')

    BRAND_NAME = os.getenv('BRAND_NAME', 'Foliodash')

    # Optional SQLite file for persisted app logs (console only when unset)
    LOG_DB = os.getenv('LOG_DB')

    # Keys copied onto app.config by FolioDash.init_app when not already set
    APP_CONFIG_KEYS = (
        'SECRET_KEY', 'API_BASE_URI', 'API_TIMEOUT', 'PORTFOLIO_LISTING_PATH',
        'SIGNUP_REDIRECT_PATH', 'BRAND_NAME', 'LOG_DB',
    )
