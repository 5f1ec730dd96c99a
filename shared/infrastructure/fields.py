"""
Model fields for guest data that must not be stored in clear text
"""

import logging

from cryptography.fernet import InvalidToken
from django.db import models

from .encryption import decrypt_string, encrypt_string

logger = logging.getLogger(__name__)


class EncryptedCharField(models.TextField):
    """
    Text column holding a Fernet token of the assigned string

    Tokens are salted, so equal values encrypt differently and the column
    cannot be filtered on. Length limits belong to the serializers.
    """

    description = "Encrypted string"

    def __init__(self, *args, **kwargs):
        kwargs.pop('max_length', None)
        super().__init__(*args, **kwargs)

    def from_db_value(self, value, expression, connection):
        if not value:
            return value
        try:
            return decrypt_string(value)
        except InvalidToken:
            logger.warning(f"{self.model.__name__}.{self.name} holds a token from another ENCRYPTION_KEY")
            return ''

    def to_python(self, value):
        if value is None or isinstance(value, str):
            return value
        return str(value)

    def get_prep_value(self, value):
        value = self.to_python(value)
        if not value:
            return ''
        return encrypt_string(value)
