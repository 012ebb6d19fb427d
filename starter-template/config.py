import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY', 'dev-secret-key-change-in-production')

    # Content API
    API_BASE_URI = os.getenv('API_BASE_URI', 'http://localhost:8000/api')
    API_TIMEOUT = float(os.getenv('API_TIMEOUT', '15'))

    BRAND_NAME = 'My Foliodash Dashboard'
