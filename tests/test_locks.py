"""Tests for the per-program lock registry."""

import asyncio

import pytest

from src.core.locks import ProgramLockRegistry


@pytest.mark.asyncio
async def test_same_program_is_serialized():
    registry = ProgramLockRegistry()
    events = []

    async def worker(name):
        async with registry.hold(1):
            events.append(f"{name}:start")
            await asyncio.sleep(0.01)
            events.append(f"{name}:end")

    await asyncio.gather(worker("a"), worker("b"))

    assert events in (
        ["a:start", "a:end", "b:start", "b:end"],
        ["b:start", "b:end", "a:start", "a:end"],
    )


@pytest.mark.asyncio
async def test_different_programs_do_not_block():
    registry = ProgramLockRegistry()
    inside = asyncio.Event()

    async def holder():
        async with registry.hold(1):
            await inside.wait()

    task = asyncio.create_task(holder())
    await asyncio.sleep(0)

    async with registry.hold(2):
        assert len(registry) == 2
        inside.set()

    await task
    assert len(registry) == 0


@pytest.mark.asyncio
async def test_lock_released_when_block_raises():
    registry = ProgramLockRegistry()

    with pytest.raises(RuntimeError):
        async with registry.hold(5):
            raise RuntimeError("boom")

    assert len(registry) == 0
    async with registry.hold(5):
        pass
