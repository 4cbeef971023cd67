"""Menu shell: session state, menu model, dispatcher and application loop."""

from shell.actions import ActionKind, invoke_action
from shell.app import AppContext, Application, LoopState
from shell.dispatcher import dispatch
from shell.errors import ActionError, ShellError, TerminalUnavailableError
from shell.menu import Menu, MenuItem, build_default_menu
from shell.session import Session

__all__ = [
    "ActionKind",
    "invoke_action",
    "AppContext",
    "Application",
    "LoopState",
    "dispatch",
    "ActionError",
    "ShellError",
    "TerminalUnavailableError",
    "Menu",
    "MenuItem",
    "build_default_menu",
    "Session",
]
