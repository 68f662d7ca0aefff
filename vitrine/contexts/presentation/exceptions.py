"""Custom exceptions for the presentation context with template references."""

from typing import Optional


class TemplateRenderError(Exception):
    """
    Exception raised when page rendering fails.

    Attributes:
        message: Error description
        template_name: Name of the template being rendered
        route: Route being rendered (if known)
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        route: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.route = route
        self.original_error = original_error

        parts = [message]

        if template_name:
            parts.append(f"\nTemplate: {template_name}")
        if route:
            parts.append(f"Route: {route}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
