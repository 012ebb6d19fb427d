"""
Foliodash Modules
=================

Flask blueprint modules for the dashboard forms.
"""

__all__ = ['portfolio', 'signup', 'ops']
