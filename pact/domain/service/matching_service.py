"""Matching engine domain service.

A matching cycle buckets the eligible population by compatibility
category, shuffles each bucket and pairs neighbours. Deciding the pairs
is pure; committing them goes through the partnership service one pair
at a time.
"""

import calendar
import random
from collections import defaultdict
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import AsyncIterator, Sequence, TypeVar

import logfire

from pact.config import MatchingSettings
from pact.domain.error import ConflictError
from pact.domain.model import Partnership, User
from pact.domain.repository import RunLock
from pact.domain.value import Gender, UserId

from .base import Service
from .exclusion_service import ExclusionService
from .partnership_service import PartnershipService
from .user_service import UserService

T = TypeVar("T")


def add_months(moment: datetime, months: int) -> datetime:
    """Shift a datetime by calendar months, clamping to the last day.

    Jan 31 + 1 month is Feb 28 (or 29).
    """
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def bucket_by_category(users: Sequence[User]) -> dict[Gender, list[User]]:
    """Group users by compatibility category.

    Every category, the flexible one included, is its own bucket.
    """
    buckets: dict[Gender, list[User]] = defaultdict(list)
    for user in users:
        buckets[user.gender].append(user)
    return dict(buckets)


def shuffle(bucket: Sequence[T], rng: random.Random) -> list[T]:
    """Return a uniformly random permutation of bucket, leaving it untouched."""
    return rng.sample(list(bucket), k=len(bucket))


def pair_consecutive(ordered: Sequence[T]) -> tuple[list[tuple[T, T]], list[T]]:
    """Pair index 0 with 1, 2 with 3 and so on.

    Returns:
        The pairs, and the trailing element of an odd-sized input
    """
    pairs = [(ordered[i], ordered[i + 1]) for i in range(0, len(ordered) - 1, 2)]
    leftover = [ordered[-1]] if len(ordered) % 2 else []
    return pairs, leftover


@dataclass
class MatchingResult:
    """Outcome of one matching cycle."""

    partnerships: list[Partnership] = field(default_factory=list)
    excluded_pairs: list[tuple[UserId, UserId]] = field(default_factory=list)
    failed_pairs: list[tuple[UserId, UserId]] = field(default_factory=list)
    unmatched: list[UserId] = field(default_factory=list)


class MatchingService(Service):
    """Runs matching cycles over the active, unpartnered population."""

    def __init__(
        self,
        user_service: UserService,
        exclusion_service: ExclusionService,
        partnership_service: PartnershipService,
        run_lock: RunLock,
        settings: MatchingSettings,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize matching service.

        Args:
            user_service: User domain service
            exclusion_service: Exclusion domain service
            partnership_service: Partnership domain service
            run_lock: Lock keeping cycles single-flight
            settings: Matching settings
            rng: Source of randomness for shuffling; a system RNG by default
        """
        self.user_service = user_service
        self.exclusion_service = exclusion_service
        self.partnership_service = partnership_service
        self.run_lock = run_lock
        self.settings = settings
        self.rng = rng or random.SystemRandom()

    @asynccontextmanager
    async def _single_flight(self) -> AsyncIterator[None]:
        name = self.settings.run_lock_name
        if not await self.run_lock.try_acquire(name):
            logfire.warn("Matching cycle already running", lock=name)
            raise ConflictError(
                "A matching cycle is already in progress",
                reason="matching_in_progress",
            )
        try:
            yield
        finally:
            await self.run_lock.release(name)

    async def eligible_users(self) -> list[User]:
        """Active users who hold no active partnership."""
        active = await self.user_service.list_active()
        booked = await self.partnership_service.active_user_ids()
        return [user for user in active if user.id not in booked]

    def plan(
        self, users: Sequence[User]
    ) -> tuple[list[tuple[User, User]], list[User]]:
        """Decide candidate pairs for a population.

        Args:
            users: Eligible users

        Returns:
            Candidate pairs, and the users left over from odd-sized buckets
        """
        pairs: list[tuple[User, User]] = []
        leftover: list[User] = []
        buckets = bucket_by_category(users)
        # Stable bucket order keeps a seeded run reproducible
        for category in sorted(buckets, key=lambda g: g.value):
            bucket_pairs, bucket_leftover = pair_consecutive(
                shuffle(buckets[category], self.rng)
            )
            pairs.extend(bucket_pairs)
            leftover.extend(bucket_leftover)
        return pairs, leftover

    async def run_matching_cycle(self, current_date: datetime) -> MatchingResult:
        """Pair up every eligible user that can be paired.

        Pairs rejected by an exclusion leave both users unmatched for this
        cycle; they are not offered to anyone else until the next run. A
        pair whose creation fails is logged and skipped.

        Args:
            current_date: Start date of the new partnerships

        Returns:
            Created partnerships and what happened to everyone else

        Raises:
            ConflictError: If another cycle is already running
        """
        with logfire.span(
            "matching_service.run_matching_cycle",
            current_date=current_date.isoformat(),
        ):
            async with self._single_flight():
                eligible = await self.eligible_users()
                pairs, leftover = self.plan(eligible)
                end_date = add_months(current_date, self.settings.partnership_months)

                result = MatchingResult(unmatched=[user.id for user in leftover])
                for user_a, user_b in pairs:
                    pair_ids = (user_a.id, user_b.id)

                    if await self.exclusion_service.either_excludes(*pair_ids):
                        logfire.info(
                            "Pair rejected by exclusion",
                            user_a_id=str(user_a.id),
                            user_b_id=str(user_b.id),
                        )
                        result.excluded_pairs.append(pair_ids)
                        result.unmatched.extend(pair_ids)
                        continue

                    try:
                        partnership = await self.partnership_service.create(
                            user_a.id, user_b.id, current_date, end_date
                        )
                    except ConflictError as e:
                        logfire.warn(
                            "Pair skipped, participant already booked",
                            user_a_id=str(user_a.id),
                            user_b_id=str(user_b.id),
                            error=str(e),
                        )
                        result.failed_pairs.append(pair_ids)
                        result.unmatched.extend(pair_ids)
                        continue
                    except Exception as e:
                        logfire.error(
                            "Pair skipped, could not create partnership",
                            user_a_id=str(user_a.id),
                            user_b_id=str(user_b.id),
                            error=str(e),
                        )
                        result.failed_pairs.append(pair_ids)
                        result.unmatched.extend(pair_ids)
                        continue

                    result.partnerships.append(partnership)

                logfire.info(
                    "Matching cycle finished",
                    eligible=len(eligible),
                    created=len(result.partnerships),
                    excluded=len(result.excluded_pairs),
                    failed=len(result.failed_pairs),
                    unmatched=len(result.unmatched),
                )
                return result
