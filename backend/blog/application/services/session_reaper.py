"""Session Reaper: asyncio daemon that purges expired admin sessions."""

import asyncio
import logging
from collections.abc import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.services.session_service import SessionService
from blog.infrastructure.database.session import Database

logger = logging.getLogger(__name__)


class SessionReaper:
    """Runs ``SessionService.reap`` at startup and then on a fixed interval.

    Each sweep uses its own database session with commit/rollback handled by
    ``database.session()``. Sweep failures are logged and the loop keeps
    going.
    """

    def __init__(
        self,
        database: Database,
        service_factory: Callable[[AsyncSession], SessionService],
        interval_seconds: float = 3600,
    ) -> None:
        self._database = database
        self._service_factory = service_factory
        self._interval = interval_seconds
        self._running = False
        self._task: asyncio.Task | None = None

    async def start(self) -> None:
        self._running = True
        self._task = asyncio.create_task(self._loop())
        logger.info("SessionReaper started (interval=%ss)", self._interval)

    async def stop(self) -> None:
        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        logger.info("SessionReaper stopped")

    async def sweep(self) -> int:
        async with self._database.session() as session:
            return await self._service_factory(session).reap()

    async def _loop(self) -> None:
        while self._running:
            try:
                await self.sweep()
            except asyncio.CancelledError:
                break
            except Exception:
                logger.exception("SessionReaper sweep failed")

            await asyncio.sleep(self._interval)
