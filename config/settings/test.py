"""
With these settings, tests run faster.
"""

from .base import *  # noqa: F403
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#secret-key
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="tXb1cGxq7oPZ0jM3wFRN5yKhVd2sQe8uLaI9nT4rBgWmC6zDJfUyHpEkOlAvSi0x",
)
# https://docs.djangoproject.com/en/dev/ref/settings/#test-runner
TEST_RUNNER = "django.test.runner.DiscoverRunner"
# https://docs.djangoproject.com/en/dev/ref/settings/#allowed-hosts
ALLOWED_HOSTS = ["testserver", "localhost", "example.com", "share.example.com"]

# Share links in tests are derived from request headers.
PUBLIC_BASE_URL = ""
