from dataclasses import dataclass

@dataclass(slots=True)
class FallTimer:
    """Countdown gating fall steps.

    Unset means no fall is in progress. Once set it counts down by the
    elapsed time fed to ``advance``; ``elapsed`` turns true when it reaches
    zero and ``active`` is true while time remains.
    """
    duration: float = 0.0
    remaining: float = 0.0
    is_set: bool = False

    def set(self, duration: float = 0.0) -> None:
        self.duration = duration
        self.remaining = duration
        self.is_set = True

    def unset(self) -> None:
        self.duration = 0.0
        self.remaining = 0.0
        self.is_set = False

    def advance(self, dt: float) -> None:
        if self.is_set:
            self.remaining -= dt

    def elapsed(self) -> bool:
        return self.is_set and self.remaining <= 0.0

    def active(self) -> bool:
        return self.is_set and self.remaining > 0.0

    def progress(self) -> float:
        if not self.is_set or self.duration <= 0.0:
            return 0.0
        return min(1.0, max(0.0, 1.0 - self.remaining / self.duration))
