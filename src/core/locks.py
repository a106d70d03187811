"""Per-program mutual exclusion for enrollment writes."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict


class ProgramLockRegistry:
    """Hands out one asyncio lock per program id.

    Locks are created on first use and discarded once nobody holds or
    waits for them, so the registry does not grow with the number of
    programs ever joined.
    """

    def __init__(self) -> None:
        self._locks: Dict[int, asyncio.Lock] = {}
        self._users: Dict[int, int] = {}

    @asynccontextmanager
    async def hold(self, program_id: int) -> AsyncIterator[None]:
        """Hold the lock for ``program_id`` for the duration of the block."""
        lock = self._locks.get(program_id)
        if lock is None:
            lock = self._locks[program_id] = asyncio.Lock()
        self._users[program_id] = self._users.get(program_id, 0) + 1

        try:
            async with lock:
                yield
        finally:
            self._users[program_id] -= 1
            if self._users[program_id] == 0:
                del self._users[program_id]
                del self._locks[program_id]

    def __len__(self) -> int:
        return len(self._locks)
