"""Screen composition for the SoloForge shell.

Everything here is a pure function of (session, menu, config): the same
inputs always produce the same renderables, so the screen can be checked
without a real terminal.
"""

from __future__ import annotations

from typing import List, TYPE_CHECKING

from pyfiglet import Figlet
from rich import box
from rich.align import Align
from rich.layout import Layout
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from common.config import Config

if TYPE_CHECKING:
    from shell.menu import Menu
    from shell.session import Session

FOOTER_HINT = "Press a highlighted key or number to select an option"
SESSION_TITLE = "Session"
MENU_TITLE = "Main Menu"
SEPARATOR_CHAR = "-"
SESSION_DATA_ROWS = 3

# Panel border plus one column of horizontal padding on each side
PANEL_CHROME_WIDTH = 4


def create_ui_layout(config: Config) -> Layout:
    """Create the three-region screen layout."""
    layout = Layout()

    layout.split_column(
        Layout(name="title", size=config.title_height),
        Layout(name="content"),
        Layout(name="footer", size=config.footer_height),
    )

    return layout


def create_title_text(config: Config) -> Text:
    """Render the application name as large FIGlet text."""
    figlet = Figlet(font=config.title_font, width=200)
    lines = [line.rstrip() for line in figlet.renderText(config.app_name).splitlines()]
    while lines and not lines[-1]:
        lines.pop()
    return Text("\n".join(lines), style=f"bold {config.accent_color}")


def session_padding_rows(menu: "Menu") -> int:
    """Blank rows needed for the session panel to match the menu panel height."""
    return max(0, len(menu) + menu.separator_count - SESSION_DATA_ROWS)


def build_session_table(session: "Session", padding_rows: int, config: Config) -> Table:
    table = Table(box=None, show_header=False, show_edge=False, pad_edge=False)
    table.add_column(style=f"bold {config.secondary_color}", no_wrap=True)
    table.add_column(no_wrap=True)
    table.add_row("Engine", session.engine)
    table.add_row("Theme", session.theme)
    table.add_row("Chaos", str(session.chaos))
    for _ in range(padding_rows):
        table.add_row("", "")
    return table


def build_menu_lines(menu: "Menu", width: int) -> List[Text]:
    """
    Build one line per menu item.

    Each line reads "<number key or two spaces> [<hotkey>] <label>", with the
    hotkey in the item's color. A separator line precedes every item that
    asks for one.
    """
    lines: List[Text] = []
    for item in menu:
        if item.show_separator_before:
            lines.append(Text(SEPARATOR_CHAR * width, style="dim"))
        number = str(item.number_key).rjust(2) if item.number_key is not None else "  "
        line = Text(f"{number} [")
        line.append(item.hotkey.upper(), style=f"bold {item.hotkey_color}")
        line.append(f"] {item.label}")
        lines.append(line)
    return lines


def build_session_panel(session: "Session", menu: "Menu", config: Config) -> Panel:
    table = build_session_table(session, session_padding_rows(menu), config)
    return Panel(
        table,
        box=box.ROUNDED,
        border_style=config.secondary_color,
        title=SESSION_TITLE,
        title_align="center",
        width=config.session_width,
    )


def build_menu_panel(menu: "Menu", config: Config) -> Panel:
    lines = build_menu_lines(menu, config.menu_width - PANEL_CHROME_WIDTH)
    return Panel(
        Text("\n").join(lines),
        box=box.ROUNDED,
        border_style=config.secondary_color,
        title=MENU_TITLE,
        title_align="center",
        width=config.menu_width,
    )


def build_content_panel(session: "Session", menu: "Menu", config: Config) -> Panel:
    """Outer container wrapping the session and menu panels side by side."""
    columns = Table.grid(padding=(0, 1))
    columns.add_column()
    columns.add_column()
    columns.add_row(
        build_session_panel(session, menu, config),
        build_menu_panel(menu, config),
    )
    return Panel(
        columns,
        box=box.ROUNDED,
        border_style=config.accent_color,
        title=f"[bold {config.accent_color}]{config.app_name}[/bold {config.accent_color}]",
        title_align="center",
        width=config.outer_width,
    )


def render_footer() -> Text:
    return Text(FOOTER_HINT, style="dim")


def render_screen(session: "Session", menu: "Menu", config: Config) -> Layout:
    """Compose the full screen: title, content and footer."""
    layout = create_ui_layout(config)

    layout["title"].update(Align.center(create_title_text(config), vertical="middle"))
    layout["content"].update(
        Align.center(build_content_panel(session, menu, config), vertical="middle")
    )
    layout["footer"].update(Align.center(render_footer(), vertical="middle"))

    return layout
