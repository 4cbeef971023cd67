"""Exception types raised by the SoloForge shell."""


class ShellError(Exception):
    """Base class for shell errors."""


class ActionError(ShellError):
    """
    Raised by an action that failed.

    Failure travels on this channel instead of the action's boolean result,
    so a failing action never stops the application loop by accident.
    """


class TerminalUnavailableError(ShellError):
    """Raised when there is no interactive terminal to render on."""
