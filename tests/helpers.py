"""Shared test helpers for Timer Boss."""

from timerboss.timer.engine import TimerEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class RecordingNotifier:
    """Stands in for the audio player; remembers every requested volume."""

    def __init__(self):
        self.calls: list[float] = []

    def play_notification(self, volume: float) -> None:
        self.calls.append(volume)


class FailingNotifier(RecordingNotifier):
    """Records the call, then blows up like a missing audio device."""

    def play_notification(self, volume: float) -> None:
        super().play_notification(volume)
        raise RuntimeError("audio device unavailable")


def run_ticks(engine: TimerEngine, count: int) -> None:
    """Fire *count* ticks without waiting on the event loop."""
    for _ in range(count):
        engine._on_tick()


def state_of(engine: TimerEngine) -> tuple:
    """Every observable field, for before/after comparisons."""
    return (
        engine.remaining,
        engine.target_duration,
        engine.is_running,
        engine.is_paused,
        engine.volume,
        engine.is_ticking,
    )
