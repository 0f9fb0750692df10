"""Testes do FollowupDispatcher."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from app.interactions.followups import FOLLOWUP_FAILURE_MESSAGE, FollowupDispatcher
from utils.errors import UpstreamApiError


class FakeFollowupClient:
    def __init__(self, fail_on: int | None = None, delay: float = 0.0) -> None:
        self.sent: list[tuple[str, str, dict[str, Any]]] = []
        self._fail_on = fail_on
        self._delay = delay

    async def create_followup_message(
        self,
        application_id: str,
        token: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        index = len(self.sent)
        self.sent.append((application_id, token, payload))
        if self._delay:
            await asyncio.sleep(self._delay)
        if index == self._fail_on:
            raise UpstreamApiError("boom", status_code=500)
        return {"id": str(index)}


@pytest.mark.asyncio
async def test_sends_messages_in_order() -> None:
    client = FakeFollowupClient()
    dispatcher = FollowupDispatcher(client, timeout_seconds=1.0)

    task = dispatcher.schedule("42", "tok", ["one", "two"])
    assert task is not None
    await task

    assert [payload["content"] for _, _, payload in client.sent] == ["one", "two"]
    assert all(app_id == "42" and token == "tok" for app_id, token, _ in client.sent)
    assert dispatcher.pending == 0


@pytest.mark.asyncio
async def test_no_messages_schedules_nothing() -> None:
    dispatcher = FollowupDispatcher(FakeFollowupClient(), timeout_seconds=1.0)

    assert dispatcher.schedule("42", "tok", []) is None
    assert dispatcher.pending == 0


@pytest.mark.asyncio
async def test_failure_stops_and_notifies_once() -> None:
    client = FakeFollowupClient(fail_on=0)
    dispatcher = FollowupDispatcher(client, timeout_seconds=1.0)

    await dispatcher.schedule("42", "tok", ["one", "two"])

    contents = [payload["content"] for _, _, payload in client.sent]
    assert contents == ["one", FOLLOWUP_FAILURE_MESSAGE]
    assert client.sent[-1][2]["flags"] == 64


@pytest.mark.asyncio
async def test_timeout_counts_as_failure() -> None:
    client = FakeFollowupClient(delay=0.2)
    dispatcher = FollowupDispatcher(client, timeout_seconds=0.01)

    await dispatcher.schedule("42", "tok", ["slow"])

    # uma tentativa para a mensagem e uma para o aviso; sem retry
    assert len(client.sent) == 2


@pytest.mark.asyncio
async def test_drain_waits_for_pending_tasks() -> None:
    client = FakeFollowupClient(delay=0.01)
    dispatcher = FollowupDispatcher(client, timeout_seconds=1.0)
    dispatcher.schedule("42", "tok", ["a"])

    await dispatcher.drain(timeout_seconds=1.0)

    assert dispatcher.pending == 0
    assert len(client.sent) == 1


@pytest.mark.asyncio
async def test_drain_cancels_after_timeout() -> None:
    client = FakeFollowupClient(delay=5.0)
    dispatcher = FollowupDispatcher(client, timeout_seconds=10.0)
    task = dispatcher.schedule("42", "tok", ["a"])

    await dispatcher.drain(timeout_seconds=0.01)

    assert task is not None
    assert task.cancelled()
    assert dispatcher.pending == 0
