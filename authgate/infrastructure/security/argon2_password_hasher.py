"""Argon2 password hasher implementation using pwdlib.

This is an INFRASTRUCTURE detail. The domain layer (IPasswordHasher interface)
defines WHAT we need (hash and verify operations), while this implementation
defines HOW we do it (using Argon2id via pwdlib).

Dependency flow:
    AuthService (application) → IPasswordHasher (domain) ← Argon2PasswordHasher (infrastructure)

pwdlib and argon2-cffi are only imported here.
"""

import logging

from argon2.exceptions import HashingError
from pwdlib import PasswordHash
from pwdlib.hashers.argon2 import Argon2Hasher

from authgate.domain.exceptions import PasswordHashingException
from authgate.domain.services.password_hasher import IPasswordHasher

logger = logging.getLogger(__name__)


class Argon2PasswordHasher(IPasswordHasher):
    """
    Production password hasher using the Argon2id algorithm via pwdlib.

    The Argon2id variant provides both side-channel and GPU attack
    resistance. Cost parameters come from configuration:

    - memory_cost: KiB of memory per hash (default 65536 = 64 MiB)
    - time_cost: number of passes over memory (default 3)
    - parallelism: lanes/threads (default 1)

    The parameters and salt are encoded in every hash, so hashes made with
    older settings keep verifying after the settings change.

    Usage:
        hasher = Argon2PasswordHasher(memory_cost=65536, time_cost=3, parallelism=1)

        hashed = hasher.hash("Str0ng!Pw")
        # Returns: "$argon2id$v=19$m=65536,t=3,p=1$<salt>$<hash>"

        hasher.verify("Str0ng!Pw", hashed)   # True
        hasher.verify("wrong", hashed)       # False
        hasher.verify("Str0ng!Pw", "junk")   # False, never raises
    """

    def __init__(
        self,
        memory_cost: int = 65536,
        time_cost: int = 3,
        parallelism: int = 1,
    ):
        """
        Initialize Argon2 password hasher with explicit cost parameters.

        Args:
            memory_cost: Memory cost in KiB
            time_cost: Number of iterations
            parallelism: Degree of parallelism

        Raises:
            PasswordHashingException: If the parameters are rejected
        """
        if memory_cost < 8 * parallelism:
            raise PasswordHashingException(
                f"Argon2 memory_cost must be at least 8 * parallelism KiB "
                f"(got memory_cost={memory_cost}, parallelism={parallelism})"
            )
        if time_cost < 1 or parallelism < 1:
            raise PasswordHashingException(
                "Argon2 time_cost and parallelism must be positive"
            )

        self.memory_cost = memory_cost
        self.time_cost = time_cost
        self.parallelism = parallelism
        self._password_hash = PasswordHash(
            (
                Argon2Hasher(
                    time_cost=time_cost,
                    memory_cost=memory_cost,
                    parallelism=parallelism,
                ),
            )
        )

    def hash(self, plain_password: str) -> str:
        """
        Hash a plain text password using Argon2id.

        The resulting PHC string contains the algorithm identifier, version,
        parameters, a fresh random salt and the derived key. Hashing the same
        password twice gives two different strings.

        Args:
            plain_password: The plain text password to hash

        Returns:
            Argon2 hash string (self-contained, includes salt and parameters)

        Raises:
            PasswordHashingException: If argon2 fails (e.g. memory exhaustion)
        """
        try:
            return self._password_hash.hash(plain_password)
        except (HashingError, MemoryError) as exc:
            logger.error(f"Argon2 hashing failed: {type(exc).__name__}")
            raise PasswordHashingException() from exc

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain text password against an Argon2 hash.

        Uses constant-time comparison. Malformed hashes, hashes from another
        algorithm and wrong passwords all yield False: the caller cannot
        tell them apart.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The Argon2 hash to check against

        Returns:
            True if the password matches, False otherwise
        """
        try:
            is_valid, _ = self._password_hash.verify_and_update(
                plain_password, hashed_password
            )
            return is_valid
        except Exception:
            # pwdlib raises UnknownHashError for foreign formats; argon2 may raise
            # InvalidHashError. Both collapse to a plain mismatch.
            return False
