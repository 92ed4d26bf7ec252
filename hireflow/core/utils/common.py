import logging
import secrets
from datetime import timezone as dt_timezone

from django.conf import settings

logger = logging.getLogger(__name__)


class DummyObject:
    """A dummy object with attributes passed in __init__"""

    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)


def to_iso_string(value):
    """
    UTC timestamp with millisecond precision and a `Z` suffix,
    eg. `2024-05-01T10:30:00.000Z`.
    """
    value = value.astimezone(dt_timezone.utc)
    return value.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def generate_share_token(nbytes=None):
    """URL safe, unguessable token used to publish a resource without login."""
    nbytes = nbytes or getattr(settings, 'SHARE_TOKEN_BYTES', 12)
    return secrets.token_urlsafe(nbytes)


def get_frontend_url(path=''):
    """
    Returns complete uri of a frontend page, by prefixing the frontend url.
    :param path: path of the page from the frontend root
    :return: Complete URL
    """
    if not hasattr(settings, 'FRONTEND_URL'):
        logger.warning('The frontend url has not been set.')
    frontend_url = getattr(settings, 'FRONTEND_URL', 'http://localhost:3000')
    return '{}/{}'.format(frontend_url.rstrip('/'), path.lstrip('/'))

