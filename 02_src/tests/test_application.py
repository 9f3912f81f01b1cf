"""Tests for Application."""

import pytest
from conftest import FakeFetchClient

from rxconsole.app import Application
from rxconsole.config import Settings
from rxconsole.models import SyncMode


@pytest.fixture
def settings():
    return Settings(api_base="http://backend.test", poll_interval=0.05, start_live=False)


class TestApplicationStart:
    """Tests for Application.start()."""

    @pytest.mark.asyncio
    async def test_start_initializes_components(self, settings, memory_clipboard):
        """Test that start initializes all components."""
        app = Application(settings, fetch_client=FakeFetchClient(), clipboard=memory_clipboard)
        await app.start()

        assert app._event_bus is not None
        assert app._trace_log is not None
        assert app._tracker is not None
        assert app._stream_state is not None
        assert app._fetch_client is not None
        assert app._metrics is not None
        assert app._scheduler is not None
        assert app._export_service is not None

        await app.stop()

    @pytest.mark.asyncio
    async def test_start_wires_dependencies(self, settings, memory_clipboard):
        """Test that components share the same bus and state."""
        fetch_client = FakeFetchClient()
        app = Application(settings, fetch_client=fetch_client, clipboard=memory_clipboard)
        await app.start()

        assert app._tracker._event_bus is app._event_bus
        assert app._tracker._trace_log is app._trace_log
        assert app._scheduler._stream_state is app._stream_state
        assert app._scheduler._fetch_client is fetch_client
        assert app._metrics._stream_state is app._stream_state
        assert app._scheduler.interval == 0.05
        assert app._scheduler.params.limit == 50

        await app.stop()

    @pytest.mark.asyncio
    async def test_start_paused(self, settings, memory_clipboard):
        fetch_client = FakeFetchClient()
        app = Application(settings, fetch_client=fetch_client, clipboard=memory_clipboard)
        await app.start()

        assert app.scheduler.mode is SyncMode.PAUSED
        assert fetch_client.calls == []

        await app.stop()

    @pytest.mark.asyncio
    async def test_start_live_fetches_and_traces(self, memory_clipboard):
        settings = Settings(api_base="http://backend.test", poll_interval=10, start_live=True)
        fetch_client = FakeFetchClient()
        app = Application(settings, fetch_client=fetch_client, clipboard=memory_clipboard)
        await app.start()

        assert app.scheduler.mode is SyncMode.LIVE
        assert len(fetch_client.calls) == 1
        assert app.stream_state.version == 1
        assert app.metrics.derive().message_count == 2
        event_types = {e.event_type for e in app.trace_log.get_trace_events()}
        assert {"mode_changed", "poll_succeeded"} <= event_types

        await app.stop()


class TestApplicationStop:
    """Tests for Application.stop()."""

    @pytest.mark.asyncio
    async def test_stop_pauses_and_closes(self, memory_clipboard):
        settings = Settings(api_base="http://backend.test", poll_interval=10, start_live=True)
        fetch_client = FakeFetchClient()
        app = Application(settings, fetch_client=fetch_client, clipboard=memory_clipboard)
        await app.start()

        await app.stop()

        assert app.scheduler.mode is SyncMode.PAUSED
        assert app.scheduler.timer is None
        assert fetch_client.closed is True


class TestApplicationAccessors:
    """Tests for accessors before start()."""

    def test_accessors_require_start(self, settings):
        app = Application(settings)

        with pytest.raises(RuntimeError):
            app.stream_state
        with pytest.raises(RuntimeError):
            app.scheduler
        with pytest.raises(RuntimeError):
            app.trace_log
