"""Declarative menu model: ordered, immutable entries bound to actions."""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from shell.actions import ActionKind


@dataclass(frozen=True)
class MenuItem:
    """A single menu entry."""

    label: str
    hotkey: str
    action: ActionKind
    number_key: Optional[int] = None
    hotkey_color: str = "white"
    show_separator_before: bool = False

    def matches(self, key_char: str) -> bool:
        """Return True if key_char, a single character, selects this item."""
        if not key_char or len(key_char) != 1:
            return False
        key = key_char.upper()
        if len(key) != 1:
            return False
        if self.hotkey.upper() == key:
            return True
        if self.number_key is not None:
            return str(self.number_key)[0] == key
        return False


class Menu:
    """
    Ordered sequence of menu items, fixed at construction.

    Hotkeys and number keys are expected to be unique, but the menu does not
    enforce it; lookups return the first match in list order.
    """

    def __init__(self, items: Iterable[MenuItem]):
        self._items: Tuple[MenuItem, ...] = tuple(items)

    @property
    def items(self) -> Tuple[MenuItem, ...]:
        return self._items

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def separator_count(self) -> int:
        return sum(1 for item in self._items if item.show_separator_before)

    def find(self, key_char: str) -> Optional[MenuItem]:
        """
        Look up the item selected by a key.

        Args:
            key_char: A single character, matched case-insensitively against
                hotkeys and against the first digit of number keys

        Returns:
            The first matching item, or None
        """
        for item in self._items:
            if item.matches(key_char):
                return item
        return None


def find_duplicate_keys(items: Iterable[MenuItem]) -> List[str]:
    """Return hotkeys and number keys that select more than one item."""
    items = list(items)
    hotkeys = Counter(item.hotkey.upper() for item in items)
    numbers = Counter(
        str(item.number_key)[0] for item in items if item.number_key is not None
    )
    duplicates = [key for key, count in hotkeys.items() if count > 1]
    duplicates.extend(key for key, count in numbers.items() if count > 1)
    # A digit hotkey collides with a number key too
    duplicates.extend(key for key in numbers if key in hotkeys and key not in duplicates)
    return duplicates


def build_default_menu() -> Menu:
    """Build the main menu."""
    return Menu([
        MenuItem("Fate Check", "F", ActionKind.FATE_CHECK, number_key=1, hotkey_color="green"),
        MenuItem("Scene Check", "C", ActionKind.SCENE_CHECK, number_key=2, hotkey_color="yellow"),
        MenuItem("Random Event", "E", ActionKind.RANDOM_EVENT, number_key=3, hotkey_color="magenta"),
        MenuItem("NPC Generator", "N", ActionKind.NPC_GENERATOR, number_key=4, hotkey_color="cyan"),
        MenuItem("Dice Roller", "D", ActionKind.DICE_ROLLER, number_key=5, hotkey_color="blue"),
        MenuItem("Settings", "S", ActionKind.SETTINGS, hotkey_color="white", show_separator_before=True),
        MenuItem("Quit", "Q", ActionKind.QUIT, hotkey_color="red"),
    ])
