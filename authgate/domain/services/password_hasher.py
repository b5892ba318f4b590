"""Password hashing interface - domain service abstraction.

This interface defines the contract for password hashing operations.
It belongs in the domain layer because password hashing is a BUSINESS REQUIREMENT,
not an infrastructure detail.

The domain cares that passwords must be:
1. Hashed before storage (security requirement)
2. Verifiable during login (business use case)
3. Verified with a single, undifferentiated failure shape, so that neither
   the return value nor an exception tells a caller WHY verification failed

The domain does NOT care:
- Which algorithm is used
- Which library implements it
- Implementation details (salt generation, cost parameters)
"""

from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """
    Interface for password hashing operations.

    Implementations are synchronous and CPU bound. Callers running inside
    an event loop are expected to push them to a worker thread.
    """

    @abstractmethod
    def hash(self, plain_password: str) -> str:
        """
        Hash a plain text password.

        The implementation must:
        1. Generate a unique salt
        2. Use a cryptographically secure algorithm
        3. Return a self-describing string (parameters + salt + digest) so
           verification needs no other state

        Args:
            plain_password: The plain text password to hash

        Returns:
            Hashed password string (format depends on implementation)

        Raises:
            PasswordHashingException: If the hash cannot be computed
        """
        pass

    @abstractmethod
    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain text password against a hashed password.

        Must never raise: a malformed hash, an unknown algorithm and a wrong
        password all produce False.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The previously hashed password to check against

        Returns:
            True if password matches, False otherwise
        """
        pass
