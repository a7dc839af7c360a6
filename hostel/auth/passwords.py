# =============================================================================
# Password Hashing
# =============================================================================
#
# bcrypt hashes with a per-hash salt. Hashing is CPU bound, so both
# operations run in a worker thread to keep the event loop free.
#
# bcrypt only reads the first 72 bytes of a password. Longer passwords are
# cut to that length before hashing and verifying, the same way the Node
# bcrypt the stored hashes may come from does it.
#
# =============================================================================

import asyncio

import bcrypt

MAX_PASSWORD_BYTES = 72


def _encode_password(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


class PasswordHasher:
    """Salted one-way hashing of passwords."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    async def hash(self, password: str) -> str:
        """
        Hash a password.

        The same password hashes differently on every call.
        """
        return await asyncio.to_thread(self._hash, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        """
        Verify a password against its hash.

        Returns False on mismatch, whatever the password. Raises ValueError
        only if `password_hash` is not a bcrypt hash.
        """
        return await asyncio.to_thread(self._verify, password, password_hash)

    def _hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode_password(password), salt).decode("utf-8")

    @staticmethod
    def _verify(password: str, password_hash: str) -> bool:
        try:
            hashed = password_hash.encode("utf-8")
        except AttributeError as e:
            raise ValueError("Password hash must be a string") from e
        try:
            return bcrypt.checkpw(_encode_password(password), hashed)
        except ValueError:
            # Raises again here if the digest itself is the problem
            bcrypt.checkpw(b"", hashed)
            return False
