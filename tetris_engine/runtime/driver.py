"""
Game Driver - serialize timer ticks and player input against one session.

Ticks arrive from a background TickTimer thread and commands from whatever
thread reads input. Both are posted to a queue and dispatched one at a time
on the driver thread, so the session is never entered concurrently and
renderers only ever see it between dispatches.
"""

import logging
import queue
import threading
from enum import IntEnum
from typing import Any, Callable, Optional, Tuple

from ..core.game_interface import GameInterface
from ..core.renderer_interface import RendererInterface
from ..core.timer_interface import TimerInterface
from ..game.score_store import GameOverResult

logger = logging.getLogger(__name__)


class TickTimer(TimerInterface):
    """
    Background timer thread that calls on_tick every interval.

    start/stop/set_interval may be called from any thread. A new interval
    restarts the current delay.
    """

    def __init__(self, interval_ms: int = 370, on_tick: Optional[Callable[[], None]] = None):
        """
        Initialize the timer (no thread runs until start()).

        Args:
            interval_ms: Milliseconds between ticks
            on_tick: Callback run on the timer thread for every tick
        """
        self._interval_ms = interval_ms
        self._on_tick = on_tick

        # Threading primitives
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()
        self._wakeup = threading.Event()
        self._shutdown = threading.Event()
        self._running = False

    def bind(self, on_tick: Callable[[], None]) -> None:
        """Set the tick callback."""
        self._on_tick = on_tick

    @property
    def interval_ms(self) -> int:
        with self._lock:
            return self._interval_ms

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._running

    def start(self) -> None:
        """Resume ticking, creating the timer thread on first use."""
        with self._lock:
            self._running = True
            if self._thread is None or not self._thread.is_alive():
                self._shutdown.clear()
                self._thread = threading.Thread(
                    target=self._timer_loop,
                    name="TickTimer",
                    daemon=True,
                )
                self._thread.start()
        self._wakeup.set()

    def stop(self) -> None:
        """Stop ticking; the thread stays alive and idle."""
        with self._lock:
            self._running = False
        self._wakeup.set()

    def set_interval(self, interval_ms: int) -> None:
        with self._lock:
            self._interval_ms = interval_ms
        self._wakeup.set()

    def shutdown(self, timeout: float = 1.0) -> None:
        """Terminate the timer thread."""
        self._shutdown.set()
        self._wakeup.set()

        if self._thread is not None:
            self._thread.join(timeout=timeout)
            self._thread = None

    def _timer_loop(self) -> None:
        """Background tick loop."""
        while not self._shutdown.is_set():
            with self._lock:
                running = self._running
                delay = self._interval_ms / 1000.0

            if not running:
                self._wakeup.wait()
                self._wakeup.clear()
                continue

            if self._wakeup.wait(timeout=delay):
                # Settings changed, re-read them and restart the delay
                self._wakeup.clear()
                continue

            if self._on_tick is not None and not self._shutdown.is_set():
                self._on_tick()


class EventType(IntEnum):
    """Kinds of events dispatched by the driver."""
    TICK = 0
    COMMAND = 1
    START = 2
    QUIT = 3


Event = Tuple[EventType, Optional[int]]


class GameDriver:
    """
    Event loop owning the dispatch of ticks and commands to a session.

    The session reaches GAME_OVER on its own; the driver decides whether to
    restart (auto_restart) or to hand the result to on_game_over.
    """

    def __init__(
        self,
        session: GameInterface,
        timer: Optional[TickTimer] = None,
        renderer: Optional[RendererInterface] = None,
        on_frame: Optional[Callable[[Any], None]] = None,
        on_game_over: Optional[Callable[[GameOverResult], None]] = None,
        auto_restart: bool = False,
    ):
        """
        Initialize the driver.

        Args:
            session: Session to drive (should use `timer` as its tick source)
            timer: TickTimer whose ticks are posted to this driver
            renderer: Renderer invoked after every state change
            on_frame: Receives each rendered frame
            on_game_over: Receives the result when a game ends
            auto_restart: Start a new game automatically after game over
        """
        self.session = session
        self.timer = timer
        self.renderer = renderer
        self.on_frame = on_frame
        self.on_game_over = on_game_over
        self.auto_restart = auto_restart

        self._events: "queue.Queue[Event]" = queue.Queue()
        self._quit = False
        self.frames_rendered = 0
        self.last_result: Optional[GameOverResult] = None

        if self.timer is not None:
            self.timer.bind(self.post_tick)

        add_listener = getattr(session, "add_game_over_listener", None)
        if add_listener is not None:
            add_listener(self._handle_game_over)

    # Posting (any thread)

    def post_tick(self) -> None:
        self._events.put((EventType.TICK, None))

    def post_command(self, kind: int) -> None:
        self._events.put((EventType.COMMAND, int(kind)))

    def post_start(self) -> None:
        self._events.put((EventType.START, None))

    def post_quit(self) -> None:
        self._events.put((EventType.QUIT, None))

    @property
    def quit_requested(self) -> bool:
        return self._quit

    # Dispatch (driver thread)

    def dispatch(self, event: Event) -> bool:
        """
        Apply one event to the session and render if it changed anything.

        Returns:
            True if the session state changed
        """
        event_type, payload = event

        if event_type == EventType.QUIT:
            self._quit = True
            return False

        if event_type == EventType.TICK:
            changed = self.session.tick()
        elif event_type == EventType.COMMAND:
            changed = self.session.command(payload)
        elif event_type == EventType.START:
            changed = self.session.start()
        else:
            logger.warning("Dropping unknown event %r", event)
            return False

        if changed:
            self.render()
        return changed

    def process_pending(self, block: bool = False, timeout: Optional[float] = None) -> int:
        """
        Dispatch queued events until the queue is empty.

        Args:
            block: Wait for the first event if none is queued
            timeout: Maximum seconds to wait when blocking

        Returns:
            Number of events dispatched
        """
        processed = 0
        while not self._quit:
            try:
                if block and processed == 0:
                    event = self._events.get(timeout=timeout)
                else:
                    event = self._events.get_nowait()
            except queue.Empty:
                break
            self.dispatch(event)
            processed += 1
        return processed

    def run(self, poll_interval: float = 0.05) -> None:
        """Dispatch events until post_quit() is called."""
        logger.info("Driver loop started")
        try:
            while not self._quit:
                self.process_pending(block=True, timeout=poll_interval)
        finally:
            self.shutdown()
        logger.info("Driver loop stopped")

    def render(self) -> None:
        """Render the session and hand the frame to on_frame."""
        if self.renderer is None:
            return
        frame = self.renderer.render(self.session)
        self.frames_rendered += 1
        if self.on_frame is not None:
            self.on_frame(frame)

    def shutdown(self) -> None:
        """Stop the timer thread and release the renderer."""
        if self.timer is not None:
            self.timer.shutdown()
        if self.renderer is not None:
            self.renderer.close()

    def _handle_game_over(self, result: GameOverResult) -> None:
        self.last_result = result
        if self.on_game_over is not None:
            self.on_game_over(result)
        if self.auto_restart:
            # Queued so the restart is its own dispatch
            self.post_start()
