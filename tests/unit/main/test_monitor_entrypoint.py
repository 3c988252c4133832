from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from types import SimpleNamespace

import pytest

from water_switch.infrastructure.services.status_monitor import MonitorEvent
from water_switch.main import monitor as monitor_module


class _FakeMonitor:
    def __init__(self) -> None:
        self.queue: asyncio.Queue = asyncio.Queue()
        self.queue.put_nowait(MonitorEvent("status", {"isOn": True}))
        self.unsubscribed = False

    def subscribe(self) -> asyncio.Queue:
        return self.queue

    def unsubscribe(self, queue: asyncio.Queue) -> None:
        self.unsubscribed = queue is self.queue


@pytest.mark.asyncio
async def test_run_logs_events_until_cancelled(monkeypatch) -> None:
    fake_monitor = _FakeMonitor()
    initialised = []

    @asynccontextmanager
    async def _fake_lifespan():
        yield SimpleNamespace(status_monitor=lambda: fake_monitor)

    monkeypatch.setattr(monitor_module, "get_settings", lambda: "settings")
    monkeypatch.setattr(
        monitor_module, "update_logging_from_settings", lambda settings: None
    )
    monkeypatch.setattr(monitor_module, "init_container", initialised.append)
    monkeypatch.setattr(monitor_module, "app_lifespan", _fake_lifespan)

    with pytest.raises(asyncio.TimeoutError):
        await asyncio.wait_for(monitor_module.run(), timeout=0.05)

    assert initialised == ["settings"]
    assert fake_monitor.queue.empty()
    assert fake_monitor.unsubscribed is True


def test_main_runs_monitor(monkeypatch) -> None:
    called = []

    async def _fake_run() -> None:
        called.append(True)

    monkeypatch.setattr(monitor_module, "configure_logging", lambda: None)
    monkeypatch.setattr(monitor_module, "run", _fake_run)

    monitor_module.main()

    assert called == [True]


def test_main_handles_keyboard_interrupt(monkeypatch) -> None:
    def _interrupt(coro) -> None:
        coro.close()
        raise KeyboardInterrupt

    monkeypatch.setattr(monitor_module, "configure_logging", lambda: None)
    monkeypatch.setattr(monitor_module.asyncio, "run", _interrupt)

    monitor_module.main()
