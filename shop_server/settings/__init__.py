"""
Settings package for shop_server.

The environment is picked with the ENVIRONMENT variable
(development, production or test). Defaults to development.
"""
from decouple import config

ENVIRONMENT = config('ENVIRONMENT', default='development')

if ENVIRONMENT == 'production':
    from .production import *  # noqa: F401,F403
elif ENVIRONMENT == 'test':
    from .test import *  # noqa: F401,F403
else:
    from .development import *  # noqa: F401,F403
