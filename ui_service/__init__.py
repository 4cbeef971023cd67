"""Terminal front end for the SoloForge shell.

Modules:
- layout: pure screen composition (title, session/menu panels, footer)
- terminal: rich-backed rendering surface and single-key input
"""

__all__ = [
    "layout",
    "terminal",
]
