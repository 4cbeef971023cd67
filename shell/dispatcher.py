"""Maps single keystrokes to menu actions."""

from typing import Optional, TYPE_CHECKING

from common.logging_setup import get_logger
from shell.actions import invoke_action

if TYPE_CHECKING:
    from shell.app import AppContext

logger = get_logger(__name__)


def normalize_key(key: Optional[str]) -> Optional[str]:
    """
    Normalize a raw key event to an uppercase character.

    Named keys such as "up" or "enter" have no menu binding and normalize
    to None.
    """
    if not key or len(key) != 1 or not key.isprintable():
        return None
    upper = key.upper()
    # Some characters upper-case to more than one (e.g. "ß" -> "SS")
    return upper if len(upper) == 1 else None


def dispatch(key: Optional[str], context: "AppContext") -> bool:
    """
    Dispatch one key event.

    Args:
        key: Raw key event from the rendering surface
        context: Application context passed to the selected action

    Returns:
        Whether the application loop should keep running. Unmapped keys
        return True.
    """
    normalized = normalize_key(key)
    item = context.menu.find(normalized) if normalized else None
    if item is None:
        logger.debug("Ignoring unmapped key %r", key)
        return True
    logger.info("Selected %s", item.label)
    return invoke_action(item.action, context)
