"""
Foliodash - Portfolio Admin Forms
=================================

Flask admin dashboard forms backed by a remote content API:
- Portfolio item create/edit form with image upload
- User signup form
- Health endpoint

Usage:
    from flask import Flask
    from foliodash import FolioDash

    app = Flask(__name__)
    app.config['API_BASE_URI'] = 'https://api.example.com'
    FolioDash(app)
"""

__version__ = '0.1.0'

from .extension import FolioDash

__all__ = ['FolioDash']
