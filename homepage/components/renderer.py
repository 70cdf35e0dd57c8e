"""
Jinja2 template loading for the page components.
"""

from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from homepage.utils import format_date


class TemplateRenderer:
    """
    Renders component partials from the package templates directory.

    Usage:
        renderer = TemplateRenderer()
        html = renderer.render("postlist.html", entries=[])
    """

    def __init__(self, templates_dir: Optional[Path] = None):
        if templates_dir is None:
            templates_dir = Path(__file__).resolve().parent.parent / "templates"

        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["format_date"] = format_date

    def render(self, template_name: str, **context: Any) -> Markup:
        """
        Render one template; the result is safe to embed in another template.
        """
        template = self.env.get_template(template_name)
        return Markup(template.render(**context))
