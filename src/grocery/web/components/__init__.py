"""UI components for the grocery app."""
from .sidebar import render_sidebar
from .list_items import render_list_items
from .change_color import render_change_color
from .feedback import render_feedback

__all__ = [
    'render_sidebar',
    'render_list_items',
    'render_change_color',
    'render_feedback'
]
