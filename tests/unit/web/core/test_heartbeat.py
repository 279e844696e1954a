"""Tests for the liveness heartbeat."""

import asyncio
import logging

import pytest

from web.core.heartbeat import heartbeat, touch_liveness_file


class TestTouchLivenessFile:
    def test_creates_file(self, tmp_path):
        path = tmp_path / "service-alive"
        assert touch_liveness_file(path) is True
        assert path.exists()

    def test_failure_is_logged_not_raised(self, tmp_path, caplog):
        path = tmp_path / "missing-dir" / "service-alive"
        with caplog.at_level(logging.WARNING):
            assert touch_liveness_file(path) is False
        assert "Unable to write file for liveness check!" in caplog.text


class TestHeartbeat:
    @pytest.mark.asyncio
    async def test_touches_file_until_cancelled(self, tmp_path):
        path = tmp_path / "service-alive"
        task = asyncio.create_task(heartbeat(path, 0.01))

        await asyncio.sleep(0.1)
        assert path.exists()

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    @pytest.mark.asyncio
    async def test_keeps_running_after_failures(self, tmp_path):
        path = tmp_path / "later" / "service-alive"
        task = asyncio.create_task(heartbeat(path, 0.01))

        await asyncio.sleep(0.05)
        assert not task.done()
        path.parent.mkdir()
        await asyncio.sleep(0.1)
        assert path.exists()

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
