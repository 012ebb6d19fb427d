"""
Signup Module
=============

Public account signup form backed by the remote content API.
"""

from flask import Blueprint

signup_bp = Blueprint(
    'signup',
    __name__,
    url_prefix='/signup',
    template_folder='templates'
)

from . import routes
from .controller import SignupFormController

__all__ = ['signup_bp', 'SignupFormController']
