"""In-memory snapshot of the strategy table shared by parent-facing reads."""

import logging
import time
from typing import Callable, Optional
from uuid import UUID

import asyncpg

from app.config import STRATEGY_CATALOG_TTL
from app.models.strategy import Strategy, StrategyCategory
from app.services import strategy_service

logger = logging.getLogger(__name__)

_MAX_LOAD_ATTEMPTS = 3


class StrategyCatalog:
    """Strategies as last fetched, in catalog order.

    Reads never hit the database while the snapshot is fresh. Any strategy
    mutation must call invalidate(); the next read re-fetches. A snapshot
    older than ``ttl`` seconds is also re-fetched, so changes made by another
    worker or directly in the database show up. Nothing is merged locally.
    """

    def __init__(
        self,
        ttl: float = STRATEGY_CATALOG_TTL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._strategies: Optional[list[Strategy]] = None
        self._loaded_at = 0.0
        self._generation = 0
        self._ttl = ttl
        self._clock = clock

    @property
    def loaded(self) -> bool:
        return self._strategies is not None

    @property
    def expired(self) -> bool:
        return self._clock() - self._loaded_at >= self._ttl

    @property
    def strategies(self) -> list[Strategy]:
        return list(self._strategies or [])

    async def refresh(self, db: asyncpg.Connection) -> list[Strategy]:
        generation = self._generation
        started_at = self._clock()
        strategies = await strategy_service.fetch_all(db)
        if generation != self._generation:
            # Invalidated while fetching: the rows may predate the mutation
            logger.debug("Discarding strategy snapshot fetched before invalidation")
            return strategies
        self._strategies = strategies
        self._loaded_at = started_at
        logger.info("Strategy catalog loaded (%d strategies)", len(strategies))
        return self.strategies

    async def ensure_loaded(self, db: asyncpg.Connection) -> None:
        if self._strategies is not None and not self.expired:
            return
        for _ in range(_MAX_LOAD_ATTEMPTS):
            await self.refresh(db)
            if self._strategies is not None:
                return
        logger.warning("Strategy catalog kept being invalidated during load")

    def invalidate(self) -> None:
        if self._strategies is not None:
            logger.debug("Strategy catalog invalidated")
        self._generation += 1
        self._strategies = None

    def get(self, strategy_id: UUID) -> Optional[Strategy]:
        return next((s for s in self._strategies or [] if s.id == strategy_id), None)

    def get_published(self, strategy_id: UUID) -> Optional[Strategy]:
        strategy = self.get(strategy_id)
        return strategy if strategy and strategy.published else None

    def filter_eligible(self, category: StrategyCategory, child_age_months: int) -> list[Strategy]:
        return strategy_service.filter_eligible(self._strategies or [], category, child_age_months)

    def weekly_boost(self) -> Optional[Strategy]:
        return strategy_service.weekly_boost(self._strategies or [])
