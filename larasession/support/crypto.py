"""
Crypto - Session id generation and cookie signing
"""
import secrets
from typing import Optional
from itsdangerous import Signer, BadSignature


class Crypto:
    """Centralized cryptography helper"""

    # === Random Token Generation ===

    @staticmethod
    def generate_token(length: int = 32) -> str:
        """
        Generate URL-safe random token

        Args:
            length: Length of token in bytes (default: 32)

        Returns:
            URL-safe random string
        """
        return secrets.token_urlsafe(length)

    # === Signed Values (itsdangerous) ===

    @staticmethod
    def create_signer(secret_key: str, salt: str = 'larasession.cookie') -> Signer:
        """
        Create a value signer

        Args:
            secret_key: Secret key for signing
            salt: Namespace for the signature

        Returns:
            Signer instance
        """
        return Signer(secret_key, salt=salt)

    @staticmethod
    def sign_value(value: str, secret_key: str) -> str:
        """
        Sign a cookie value

        Args:
            value: Plain value
            secret_key: Secret key

        Returns:
            Value with its signature appended
        """
        return Crypto.create_signer(secret_key).sign(value).decode('utf-8')

    @staticmethod
    def unsign_value(signed_value: str, secret_key: str) -> Optional[str]:
        """
        Verify and extract a signed cookie value

        Args:
            signed_value: Signed value
            secret_key: Secret key

        Returns:
            Original value if the signature is valid, None otherwise
        """
        try:
            return Crypto.create_signer(secret_key).unsign(signed_value).decode('utf-8')
        except BadSignature:
            return None
