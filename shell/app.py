"""Application context and the render/read/dispatch loop."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Optional

from common.config import Config
from common.logging_setup import get_logger
from shell.actions import pause
from shell.dispatcher import dispatch
from shell.errors import ActionError
from shell.menu import Menu, build_default_menu, find_duplicate_keys
from shell.session import Session
from ui_service.layout import render_screen

logger = get_logger(__name__)

GOODBYE_MESSAGE = "Goodbye!"


class LoopState(Enum):
    """Application loop states."""

    RUNNING = auto()
    TERMINATED = auto()  # Final


@dataclass
class AppContext:
    """Composition root handed to every action."""

    surface: Any
    config: Config = field(default_factory=Config)
    session: Session = None  # type: ignore[assignment]
    menu: Menu = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = Session.from_config(self.config)
        if self.menu is None:
            self.menu = build_default_menu()


def _default_renderer(context: AppContext) -> Any:
    return render_screen(context.session, context.menu, context.config)


class Application:
    """
    Two-state loop: render, read one key, dispatch, transition.

    The loop terminates only when dispatch returns False, which the built-in
    actions do only after a confirmed quit.
    """

    def __init__(
        self,
        context: AppContext,
        renderer: Optional[Callable[[AppContext], Any]] = None,
    ):
        self.context = context
        self._renderer = renderer or _default_renderer
        self.state = LoopState.RUNNING

        duplicates = find_duplicate_keys(context.menu)
        if duplicates:
            logger.warning("Menu keys bound more than once: %s", ", ".join(duplicates))

    @property
    def running(self) -> bool:
        return self.state is LoopState.RUNNING

    def transition(self, keep_running: bool) -> LoopState:
        """Apply a dispatch result to the loop state."""
        if self.state is LoopState.RUNNING and not keep_running:
            logger.info("Application loop terminating")
            self.state = LoopState.TERMINATED
        return self.state

    def render(self) -> None:
        surface = self.context.surface
        surface.clear()
        surface.write(self._renderer(self.context), height=surface.screen_height())

    def step(self) -> LoopState:
        """Run one iteration of the loop."""
        if not self.running:
            return self.state
        self.render()
        key = self.context.surface.read_key()
        try:
            keep_running = dispatch(key, self.context)
        except ActionError as exc:
            logger.error("Action failed: %s", exc)
            pause(self.context, f"Error: {exc}", style="bold red")
            keep_running = True
        return self.transition(keep_running)

    def run(self) -> int:
        """
        Loop until terminated.

        Returns:
            Process exit code
        """
        logger.info("Application loop started")
        while self.running:
            self.step()
        surface = self.context.surface
        surface.clear()
        surface.write(GOODBYE_MESSAGE)
        return 0
