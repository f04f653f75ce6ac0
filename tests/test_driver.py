"""
Tests for the event loop and tick timer.
"""

import threading
import time


class RecordingRenderer:
    """Renderer double that remembers the score at every frame."""

    def __init__(self):
        self.frames = []
        self.closed = False

    def render(self, session):
        self.frames.append(session.get_score())
        return len(self.frames)

    def close(self):
        self.closed = True


class TestTickTimer:
    """Tests for the background tick thread."""

    def test_ticks_while_running(self):
        """Test the callback fires repeatedly after start."""
        from tetris_engine.runtime.driver import TickTimer

        fired = threading.Event()
        ticks = []

        def on_tick():
            ticks.append(time.perf_counter())
            if len(ticks) >= 3:
                fired.set()

        timer = TickTimer(interval_ms=5, on_tick=on_tick)
        timer.start()
        try:
            assert fired.wait(timeout=2.0)
        finally:
            timer.shutdown()

        assert len(ticks) >= 3

    def test_stop_and_interval(self):
        """Test stop halts ticks and set_interval is remembered."""
        from tetris_engine.runtime.driver import TickTimer

        ticks = []
        timer = TickTimer(interval_ms=60000, on_tick=lambda: ticks.append(1))
        timer.start()
        assert timer.is_running

        timer.set_interval(250)
        timer.stop()
        try:
            assert timer.interval_ms == 250
            assert not timer.is_running
            time.sleep(0.05)
            assert ticks == []
        finally:
            timer.shutdown()


class TestGameDriver:
    """Tests for serialized dispatch."""

    def _make(self, make_session, **kwargs):
        from tetris_engine.runtime.driver import GameDriver

        session = make_session()
        renderer = RecordingRenderer()
        frames = []
        driver = GameDriver(session, renderer=renderer, on_frame=frames.append, **kwargs)
        return driver, session, renderer, frames

    def test_events_dispatch_in_order(self, make_session):
        """Test queued events are applied one at a time, in order."""
        from tetris_engine.game.session import Command, Status

        driver, session, renderer, frames = self._make(make_session)

        driver.post_start()
        driver.post_command(Command.MOVE_LEFT)
        driver.post_tick()

        assert driver.process_pending() == 3
        assert session.status == Status.RUNNING
        assert session.cur_x == 5
        assert frames == [1, 2, 3]
        assert driver.frames_rendered == 3

    def test_rejected_command_not_rendered(self, make_session):
        """Test unchanged state produces no frame."""
        from tetris_engine.game.session import Command

        driver, session, renderer, frames = self._make(make_session)

        driver.post_command(Command.MOVE_LEFT)  # not started yet

        assert driver.process_pending() == 1
        assert frames == []

    def test_refused_start_not_rendered(self, make_session):
        """Test a start ignored while paused produces no frame."""
        from tetris_engine.game.session import Command, Status

        driver, session, renderer, frames = self._make(make_session)
        driver.post_start()
        driver.post_command(Command.TOGGLE_PAUSE)
        driver.process_pending()
        rendered = driver.frames_rendered

        driver.post_start()

        assert driver.process_pending() == 1
        assert driver.frames_rendered == rendered
        assert session.status == Status.PAUSED

    def test_process_pending_empty_queue(self, make_session):
        """Test an empty queue dispatches nothing."""
        driver, _, _, _ = self._make(make_session)

        assert driver.process_pending(block=True, timeout=0.01) == 0

    def test_quit_stops_processing(self, make_session):
        """Test events after quit are left in the queue."""
        driver, session, _, _ = self._make(make_session)

        driver.post_quit()
        driver.post_start()

        assert driver.process_pending() == 1
        assert driver.quit_requested

    def test_run_returns_on_quit(self, make_session):
        """Test run() exits after a quit event and closes the renderer."""
        driver, session, renderer, _ = self._make(make_session)

        driver.post_start()
        driver.post_quit()
        driver.run(poll_interval=0.01)

        assert renderer.closed is True
        assert session.is_game_over() is False

    def test_game_over_auto_restart(self, make_session, fill_row):
        """Test the driver, not the session, restarts after game over."""
        from tetris_engine.game.session import Status

        results = []
        driver, session, _, _ = self._make(
            make_session, on_game_over=results.append, auto_restart=True
        )
        driver.post_start()
        driver.process_pending()

        session.current_piece = session.current_piece.empty()
        for y in range(18, 22):
            fill_row(session.board, y, gaps=(0,))
        session.falling_done = True
        driver.post_tick()

        driver.process_pending()

        assert len(results) == 1
        assert driver.last_result is results[0]
        assert session.status == Status.RUNNING
        assert list(session.board.settled_cells()) == []
        assert len(session.active_piece_cells()) == 4
        assert session.score == 0

    def test_timer_ticks_reach_session(self):
        """Test timer ticks are posted to the queue and applied by the driver."""
        from tetris_engine.game.config import TetrisConfig
        from tetris_engine.game.session import TetrisSession
        from tetris_engine.runtime.driver import GameDriver, TickTimer

        timer = TickTimer(interval_ms=5)
        session = TetrisSession(config=TetrisConfig(min_interval=5, max_interval=5), timer=timer)
        driver = GameDriver(session, timer=timer)

        driver.post_start()
        driver.process_pending()
        session.start_recording()

        deadline = time.time() + 2.0
        while len(session.history) < 2 and time.time() < deadline:
            driver.process_pending(block=True, timeout=0.05)
        driver.shutdown()

        assert len(session.history) >= 2
