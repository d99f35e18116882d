"""
Views component - landing page view functions and the render tree model.
"""

from .component import (
    about,
    app,
    button,
    container,
    divider,
    element,
    footer,
    nav_bar,
)
from .models import ViewNode

__all__ = [
    # Page root
    "app",
    # Views
    "about",
    "button",
    "container",
    "divider",
    "element",
    "footer",
    "nav_bar",
    # Models
    "ViewNode",
]
