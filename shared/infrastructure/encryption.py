"""
Field-level encryption for guest identity documents

Fernet tokens (AES-CBC with an HMAC-SHA256 signature) keyed from
settings.ENCRYPTION_KEY. Any non-empty string works as the key: it is
stretched with SHA-256 into the 32 url-safe bytes Fernet expects.
"""

from functools import lru_cache
import base64
import hashlib

from cryptography.fernet import Fernet
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


def get_encryption_key() -> bytes:
    secret = getattr(settings, 'ENCRYPTION_KEY', None)
    if not secret:
        raise ImproperlyConfigured("ENCRYPTION_KEY must be set to store guest ID numbers")
    if isinstance(secret, bytes):
        return secret
    return base64.urlsafe_b64encode(hashlib.sha256(secret.encode()).digest())


@lru_cache(maxsize=4)
def _fernet_for(key: bytes) -> Fernet:
    return Fernet(key)


def encrypt_string(plaintext: str) -> str:
    if not plaintext:
        return ''
    return _fernet_for(get_encryption_key()).encrypt(plaintext.encode()).decode()


def decrypt_string(token: str) -> str:
    """Raises cryptography.fernet.InvalidToken when the token was made with another key."""
    if not token:
        return ''
    return _fernet_for(get_encryption_key()).decrypt(token.encode()).decode()
