# Put the project root on sys.path so tests import the packages without install.
import sys
from pathlib import Path
from typing import Any, Iterable, List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


class FakeSurface:
    """Rendering surface that replays scripted keys and confirmation answers."""

    def __init__(self, keys: Iterable[str] = (), answers: Iterable[Optional[bool]] = ()) -> None:
        self.keys: List[str] = list(keys)
        self.answers: List[Optional[bool]] = list(answers)
        self.events: List[tuple] = []
        self.written: List[Any] = []

    def clear(self) -> None:
        self.events.append(("clear",))

    def write(self, renderable: Any, height: Optional[int] = None) -> None:
        self.written.append(renderable)
        self.events.append(("write", renderable))

    def screen_height(self) -> int:
        return 39

    def read_key(self) -> str:
        self.events.append(("read_key",))
        if not self.keys:
            raise AssertionError("read_key called with no scripted keys left")
        return self.keys.pop(0)

    def confirm(self, prompt: str, default: bool = False) -> bool:
        self.events.append(("confirm", prompt, default))
        answer = self.answers.pop(0) if self.answers else None
        # None plays the part of pressing Enter on an empty prompt
        return default if answer is None else answer


@pytest.fixture
def fake_surface():
    return FakeSurface()
