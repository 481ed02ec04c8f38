# mentorhub/api/__init__.py
# Page routers, one module per URL area.

from . import admin
from . import auth
from . import availability
from . import dashboard
from . import mentors
from . import profile
from . import requests
from . import sessions

__all__ = [
    "admin",
    "auth",
    "availability",
    "dashboard",
    "mentors",
    "profile",
    "requests",
    "sessions",
]
