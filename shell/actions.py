"""Menu action kinds and the handlers bound to them."""

from enum import Enum
from typing import Callable, Dict, TYPE_CHECKING

from rich.markup import escape

from common.logging_setup import get_logger

if TYPE_CHECKING:
    from shell.app import AppContext

logger = get_logger(__name__)

QUIT_PROMPT = "Are you sure you want to quit?"
CONTINUE_HINT = "Press any key to continue..."


class ActionKind(Enum):
    """Actions a menu item can be bound to. Values are display names."""

    FATE_CHECK = "Fate Check"
    SCENE_CHECK = "Scene Check"
    RANDOM_EVENT = "Random Event"
    NPC_GENERATOR = "NPC Generator"
    DICE_ROLLER = "Dice Roller"
    SETTINGS = "Settings"
    QUIT = "Quit"


ActionHandler = Callable[["AppContext", ActionKind], bool]


def pause(context: "AppContext", message: str, style: str = "white") -> None:
    """Show a message and wait for one keystroke."""
    surface = context.surface
    surface.clear()
    surface.write(f"[{style}]{escape(message)}[/{style}]")
    surface.write(f"[dim]{CONTINUE_HINT}[/dim]")
    surface.read_key()


def not_implemented(context: "AppContext", kind: ActionKind) -> bool:
    """Placeholder for features that have not been built yet."""
    pause(context, f"{kind.value} is not implemented yet...")
    return True


def quit_action(context: "AppContext", kind: ActionKind) -> bool:
    """
    Ask for confirmation before quitting.

    Returns:
        False only when the user confirmed, so the loop stops
    """
    context.surface.clear()
    confirmed = context.surface.confirm(QUIT_PROMPT, default=False)
    logger.info("Quit %s", "confirmed" if confirmed else "declined")
    return not confirmed


ACTION_HANDLERS: Dict[ActionKind, ActionHandler] = {
    ActionKind.FATE_CHECK: not_implemented,
    ActionKind.SCENE_CHECK: not_implemented,
    ActionKind.RANDOM_EVENT: not_implemented,
    ActionKind.NPC_GENERATOR: not_implemented,
    ActionKind.DICE_ROLLER: not_implemented,
    ActionKind.SETTINGS: not_implemented,
    ActionKind.QUIT: quit_action,
}


def invoke_action(kind: ActionKind, context: "AppContext") -> bool:
    """
    Run the handler bound to an action kind.

    Returns:
        True to keep the shell running, False to stop it
    """
    handler = ACTION_HANDLERS.get(kind, not_implemented)
    logger.debug("Invoking action %s", kind.name)
    return bool(handler(context, kind))
