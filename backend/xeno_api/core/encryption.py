"""
Encryption utilities for third-party credentials stored on a tenant
Uses Fernet (symmetric encryption) from cryptography library
"""

import base64
import logging
from typing import Optional

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

logger = logging.getLogger(__name__)


class EncryptionError(Exception):
    """Custom exception for encryption errors"""
    pass


class TokenEncryption:
    """
    Handles encryption and decryption of sensitive tokens using Fernet.
    The Fernet key is derived from the application secret key.
    """

    def __init__(self, secret_key: str):
        self._cipher = self._initialize_cipher(secret_key)

    @staticmethod
    def _initialize_cipher(secret_key: str) -> Fernet:
        if not secret_key or len(secret_key) < 16:
            raise EncryptionError("SECRET_KEY is not configured or too short")

        # Derive a 32-byte key from SECRET_KEY using PBKDF2
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=32,
            salt=b'xeno_tenant_credentials',  # Static salt for consistency
            iterations=100000,
        )
        key_bytes = kdf.derive(secret_key.encode())
        return Fernet(base64.urlsafe_b64encode(key_bytes))

    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt plaintext string

        Args:
            plaintext: String to encrypt

        Returns:
            Fernet token as text
        """
        if not plaintext:
            raise EncryptionError("Cannot encrypt empty string")
        return self._cipher.encrypt(plaintext.encode()).decode('utf-8')

    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt ciphertext string

        Args:
            ciphertext: Encrypted string to decrypt

        Returns:
            Decrypted plaintext string
        """
        if not ciphertext:
            raise EncryptionError("Cannot decrypt empty string")
        try:
            return self._cipher.decrypt(ciphertext.encode()).decode('utf-8')
        except InvalidToken as e:
            raise EncryptionError("Failed to decrypt data: invalid token or key") from e

    def decrypt_token(self, encrypted_token: Optional[str]) -> Optional[str]:
        """
        Decrypt a stored credential, returning None if it cannot be read
        """
        if not encrypted_token:
            return None
        try:
            return self.decrypt(encrypted_token)
        except EncryptionError as e:
            logger.error(f"Credential decryption failed: {e}")
            return None
