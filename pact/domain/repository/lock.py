"""Named mutual-exclusion lock interface."""

from abc import ABC, abstractmethod


class RunLock(ABC):
    """Process-spanning lock keyed by name.

    Used to keep long operations such as a matching cycle single-flight.
    """

    @abstractmethod
    async def try_acquire(self, name: str) -> bool:
        """Take the lock without waiting.

        Args:
            name: Lock key, e.g. "matching-run"

        Returns:
            True if the lock was taken, False if someone else holds it
        """
        pass

    @abstractmethod
    async def release(self, name: str) -> None:
        """Release a lock previously taken with try_acquire."""
        pass
