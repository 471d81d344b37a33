"""
Routes Package

Blueprints for the JSON API (/api) and the server-rendered pages.
"""

from .api import api
from .views import views

__all__ = ['api', 'views']
