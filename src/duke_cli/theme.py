"""Theming for the Duke console output."""

import os

from rich.console import Console
from rich.theme import Theme

# City Lights palette
COLORS = {
    'primary': '#68D5F3',
    'accent': '#B7C5D3',
    'success': '#8BD649',
    'warning': '#FFD93D',
    'error': '#F78C6C',
    'text_muted': '#718CA1',
    'text_bright': '#FFFFFF',
    'border': '#41505E',
}

DUKE_THEME = Theme({
    'muted': COLORS['text_muted'],
    'bright': f"{COLORS['text_bright']} bold",
    'primary': f"{COLORS['primary']} bold",
    'accent': COLORS['accent'],
    'success': f"{COLORS['success']} bold",
    'warning': f"{COLORS['warning']} bold",
    'error': f"{COLORS['error']} bold",
    'task_pending': COLORS['primary'],
    'task_done': COLORS['success'],
    'task_number': COLORS['text_muted'],
    'border': COLORS['border'],
})


def get_themed_console(no_color: bool = False) -> Console:
    """Get a console with the Duke theme applied.

    Colour is dropped when ``no_color`` is set or ``NO_COLOR`` is exported.
    """
    no_color = no_color or os.environ.get("NO_COLOR") is not None
    return Console(theme=DUKE_THEME, no_color=no_color, highlight=False, soft_wrap=True)


def get_task_style(is_done: bool) -> str:
    """Get the style name for a task's completion state."""
    return 'task_done' if is_done else 'task_pending'
