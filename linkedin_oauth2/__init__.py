"""
Python binding for the LinkedIn company pages API.

The public entry points are :class:`LinkedInApi` for authenticated API calls
and :class:`LinkedInOAuth` for obtaining access tokens.
"""

from linkedin_oauth2.api import LinkedInApi
from linkedin_oauth2.oauth import LinkedInOAuth
from linkedin_oauth2.settings import configure, current_settings, reset_configuration

__all__ = [
    "LinkedInApi",
    "LinkedInOAuth",
    "configure",
    "current_settings",
    "reset_configuration",
]
