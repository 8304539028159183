import secrets

from src.app.services.token_generator import TokenGenerator


class SecureTokenGenerator(TokenGenerator):
    """URL-safe tokens from the OS CSPRNG (32 bytes of entropy)"""

    def __init__(self, num_bytes: int = 32):
        self.num_bytes = num_bytes

    def generate(self) -> str:
        return secrets.token_urlsafe(self.num_bytes)
