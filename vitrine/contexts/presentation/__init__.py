"""
Presentation Context

Responsibilities:
- Maps content records to page and card views
- Renders Markdown bodies and tables of contents
- Resolves site configuration and renders Jinja2 page templates
- Writes the static site and answers route lookups (404 for unknown paths)
- Holds view-local widget state (reveal, scroll, theme, scheduling embed)

Owns: Views, templates, routing, site build output
Never: Reads content files directly or alters content metadata
"""

from vitrine.contexts.presentation.exceptions import TemplateRenderError
from vitrine.contexts.presentation.site import BuildResult, RenderedPage, Site
from vitrine.contexts.presentation.site_config import load_site_config
from vitrine.contexts.presentation.template_registry import TemplateRegistry
from vitrine.contexts.presentation.widgets import (
    MenuToggle,
    RevealOnce,
    SchedulingEmbed,
    ScrollThreshold,
    ThemePreference,
)

__all__ = [
    # Site
    "Site",
    "RenderedPage",
    "BuildResult",
    "TemplateRegistry",
    "load_site_config",
    # Widgets
    "MenuToggle",
    "RevealOnce",
    "ScrollThreshold",
    "ThemePreference",
    "SchedulingEmbed",
    # Errors
    "TemplateRenderError",
]
