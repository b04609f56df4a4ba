"""
Development settings for shop_server project.
"""

from decouple import config
from .base import *  # noqa: F401,F403

DEBUG = config('DEBUG', default=True, cast=bool)

# SQLite unless a MySQL database is configured
if not config('MYSQL_HOST', default=''):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }

# Keep the per-order timer on so local runs confirm orders without the sweep
ORDER_AUTO_CONFIRM_TIMER_ENABLED = config('ORDER_AUTO_CONFIRM_TIMER_ENABLED', default=True, cast=bool)

LOGGING['root']['level'] = 'DEBUG'
