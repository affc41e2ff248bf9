"""In-memory invite code repository for testing."""

from sqlalchemy.exc import IntegrityError

from pact.domain.model.invite_code import InviteCode
from pact.domain.repository.invite_code import InviteCodeRepository
from pact.domain.value import InviteCodeValue


class InMemoryInviteCodeRepository(InviteCodeRepository):
    """In-memory implementation of InviteCodeRepository for testing."""

    def __init__(self) -> None:
        self._codes: dict[str, InviteCode] = {}

    async def find_by_code(self, code: InviteCodeValue) -> InviteCode | None:
        """Find an invite code."""
        return self._codes.get(code.root)

    async def add(self, invite_code: InviteCode) -> InviteCode:
        """Insert a new code.

        Raises:
            IntegrityError: If the code already exists
        """
        if invite_code.code.root in self._codes:
            raise IntegrityError("Duplicate invite code", None, Exception())
        self._codes[invite_code.code.root] = invite_code
        return invite_code

    async def compare_and_swap(
        self, invite_code: InviteCode, expected_version: int
    ) -> bool:
        """Replace the stored code if its version matches."""
        current = self._codes.get(invite_code.code.root)
        if current is None or current.version != expected_version:
            return False
        self._codes[invite_code.code.root] = invite_code
        return True

    async def find_all(self) -> list[InviteCode]:
        """List every code, newest first."""
        return sorted(
            reversed(list(self._codes.values())),
            key=lambda c: c.created_at,
            reverse=True,
        )
