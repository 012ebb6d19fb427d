"""
Portfolio Admin Module
======================

Admin forms for portfolio items backed by the remote content API.

Provides:
- Portfolio listing page (/portfolio)
- Create form (/portfolio/add)
- Edit form (/portfolio/add?id=<item id>), prefilled from the existing item
- Image upload forwarded to the API as multipart
"""

from flask import Blueprint

portfolio_bp = Blueprint(
    'portfolio',
    __name__,
    url_prefix='/portfolio',
    template_folder='templates'
)

from . import routes
from .controller import PortfolioFormController, UploadedImage

__all__ = ['portfolio_bp', 'PortfolioFormController', 'UploadedImage']
