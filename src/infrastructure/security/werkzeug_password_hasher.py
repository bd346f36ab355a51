"""
Werkzeug Password Hasher - PasswordHasher port backed by werkzeug.security.

Hashes are salted and self-describing ("scrypt:32768:8:1$salt$hash"), so the
method can change later without invalidating stored hashes.
"""

from werkzeug.security import check_password_hash, generate_password_hash

from src.domain.ports.password_hasher import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    def __init__(self, method: str = "scrypt"):
        self._method = method

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self._method)

    def verify(self, password_hash: str, password: str) -> bool:
        return check_password_hash(password_hash, password)
