"""Test helpers (small, reusable callables).

Keep this file tiny: it exists so every suite raises and recognises the
same exception instead of growing one-off lambdas.
"""

from __future__ import annotations

import asyncio


class Boom(Exception):
    """Exception raised by the raising helpers below."""


def raise_boom(*_args: object) -> None:
    raise Boom("boom")


async def raise_boom_async(*_args: object) -> None:
    await asyncio.sleep(0)
    raise Boom("boom async")


def caught(_exc: Exception) -> int:
    """Catch function used to check that payloads get reshaped."""
    return -1


async def resolve[T](value: T) -> T:
    await asyncio.sleep(0)
    return value
