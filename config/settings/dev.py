"""Development settings.

Extends the base settings with debug enabled and all hosts allowed. Do not
use these settings in production!
"""

from .base import *  # noqa: F401,F403

DEBUG = True

ALLOWED_HOSTS = ['*']
