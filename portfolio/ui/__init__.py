"""UI components module."""

from .styling import UIStyles
from .sidebar import Sidebar
from .header import Header
from .footer import Footer
from .navigation import go_to, current_page
