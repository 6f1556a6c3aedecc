"""Tests for detail panel selection."""

from __future__ import annotations

import asyncio

from pokedex_client import DetailPanel
from pokedex_client.detail import LOAD_FAILED_MESSAGE

from .fakes import FakeClientAPI


class SlowFirstAPI(FakeClientAPI):
    """Holds detail requests for ``slow_id`` until ``release`` is set."""

    def __init__(self, slow_id: int) -> None:
        super().__init__()
        self.slow_id = slow_id
        self.release = None

    async def get_detail(self, pokemon_id: int):
        if pokemon_id == self.slow_id:
            await self.release.wait()
        return await super().get_detail(pokemon_id)


def test_select_loads_detail() -> None:
    panel = DetailPanel(FakeClientAPI())

    record = asyncio.run(panel.select(25))

    assert record is not None and record.name == "pikachu"
    assert panel.detail == record
    assert (panel.selected_id, panel.loading, panel.error) == (25, False, None)


def test_stale_result_is_discarded() -> None:
    api = SlowFirstAPI(slow_id=1)
    panel = DetailPanel(api)

    async def scenario():
        api.release = asyncio.Event()
        slow = asyncio.create_task(panel.select(1))
        await asyncio.sleep(0)
        await panel.select(25)
        api.release.set()
        return await slow

    stale = asyncio.run(scenario())

    assert stale is None
    assert panel.selected_id == 25
    assert panel.detail is not None and panel.detail.name == "pikachu"


def test_stale_error_is_discarded() -> None:
    api = SlowFirstAPI(slow_id=9999)
    api.fail.add(9999)
    panel = DetailPanel(api)

    async def scenario():
        api.release = asyncio.Event()
        slow = asyncio.create_task(panel.select(9999))
        await asyncio.sleep(0)
        await panel.select(25)
        api.release.set()
        await slow

    asyncio.run(scenario())

    assert panel.error is None
    assert panel.detail is not None and panel.detail.id == 25


def test_failure_sets_error() -> None:
    api = FakeClientAPI()
    api.fail.add(9999)
    panel = DetailPanel(api)

    assert asyncio.run(panel.select(9999)) is None
    assert panel.error == LOAD_FAILED_MESSAGE
    assert panel.loading is False
    assert panel.detail is None


def test_close_during_load_ignores_result() -> None:
    api = SlowFirstAPI(slow_id=1)
    panel = DetailPanel(api)

    async def scenario():
        api.release = asyncio.Event()
        slow = asyncio.create_task(panel.select(1))
        await asyncio.sleep(0)
        panel.close()
        api.release.set()
        return await slow

    assert asyncio.run(scenario()) is None
    assert panel.selected_id is None
    assert panel.detail is None
    assert panel.loading is False


def test_selecting_none_clears_panel() -> None:
    panel = DetailPanel(FakeClientAPI())
    asyncio.run(panel.select(25))

    assert asyncio.run(panel.select(None)) is None
    assert panel.detail is None
    assert panel.selected_id is None
