"""Mutable session settings shown in the session panel."""

from typing import Optional

from common.config import Config

CHAOS_MIN = 1
CHAOS_MAX = 9


def clamp_chaos(value: int) -> int:
    """Clamp a chaos value into [CHAOS_MIN, CHAOS_MAX]."""
    return max(CHAOS_MIN, min(CHAOS_MAX, int(value)))


class Session:
    """
    Session settings for one run of the shell.

    Chaos is always stored clamped; out-of-range values are never rejected.
    """

    def __init__(self, engine: str = "Mythic 2e", theme: str = "Fantasy", chaos: int = 5):
        self.engine = engine
        self.theme = theme
        self._chaos = CHAOS_MIN
        self.set_chaos(chaos)

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "Session":
        """Create a session populated with the configured defaults."""
        config = config or Config()
        return cls(config.default_engine, config.default_theme, config.default_chaos)

    @property
    def chaos(self) -> int:
        return self._chaos

    @chaos.setter
    def chaos(self, value: int) -> None:
        self.set_chaos(value)

    def set_chaos(self, value: int) -> int:
        """
        Store a chaos value, clamped into range.

        Returns:
            The value actually stored
        """
        self._chaos = clamp_chaos(value)
        return self._chaos

    def __repr__(self) -> str:
        return f"Session(engine={self.engine!r}, theme={self.theme!r}, chaos={self._chaos})"
