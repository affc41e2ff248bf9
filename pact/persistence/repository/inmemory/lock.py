"""In-memory run lock for testing."""

from pact.domain.repository.lock import RunLock


class InMemoryRunLock(RunLock):
    """Non-blocking named lock shared by everyone holding this instance."""

    def __init__(self) -> None:
        self._held: set[str] = set()

    async def try_acquire(self, name: str) -> bool:
        if name in self._held:
            return False
        self._held.add(name)
        return True

    async def release(self, name: str) -> None:
        self._held.discard(name)

    def is_held(self, name: str) -> bool:
        return name in self._held
