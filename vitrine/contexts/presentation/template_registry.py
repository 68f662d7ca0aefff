from pathlib import Path
from typing import Dict

from jinja2 import Environment, FileSystemLoader, Template, TemplateNotFound, select_autoescape

from vitrine.contexts.presentation.badges import badge_classes, join_classes

TEMPLATES_PATH = Path(__file__).parent / "templates"
TEMPLATE_SUFFIX = ".html.jinja"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 page templates.

    Templates are stored in vitrine/contexts/presentation/templates/{page_name}.html.jinja;
    partials shared between pages live under templates/partials/.
    HTML autoescaping is on; pre-rendered Markdown is passed through with |safe.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding the templates. Defaults to
                            vitrine/contexts/presentation/templates/
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = templates_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            autoescape=select_autoescape(enabled_extensions=("html", "jinja")),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.globals["badge_classes"] = badge_classes
        self.env.globals["join_classes"] = join_classes

    def get_template(self, page_name: str) -> Template:
        """
        Get a template by page name, loading and caching it if necessary.

        Args:
            page_name: Name of the page template (e.g., 'blog_post')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if page_name in self._cache:
            return self._cache[page_name]

        template_path = f"{page_name}{TEMPLATE_SUFFIX}"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for page '{page_name}' at {self.templates_path / template_path}"
            ) from e

        self._cache[page_name] = template
        return template

    def get_template_path(self, page_name: str) -> Path:
        """File path of a page template."""
        return self.templates_path / f"{page_name}{TEMPLATE_SUFFIX}"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, page_name: str) -> bool:
        """Check if a template is in the cache."""
        return page_name in self._cache
