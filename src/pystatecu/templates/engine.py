"""
Jinja2 template engine for StateCU file generation.

Headers (the ``#>`` documentation block and the ``#`` provenance block)
are rendered from templates; record lines are formatted directly by the
component writers.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, select_autoescape

from pystatecu.templates.filters import register_all_filters

# Default template directory
TEMPLATES_DIR = Path(__file__).parent / "statecu"


class TemplateEngine:
    """
    Template engine for StateCU file headers.
    """

    def __init__(
        self,
        template_dir: Path | str | None = None,
        use_package_templates: bool = True,
    ) -> None:
        """
        Initialize the template engine.

        Args:
            template_dir: Custom template directory, searched first (optional)
            use_package_templates: If True, also load built-in templates
        """
        loaders: list[FileSystemLoader] = []

        if template_dir:
            loaders.append(FileSystemLoader(str(template_dir)))

        if use_package_templates and TEMPLATES_DIR.exists():
            loaders.append(FileSystemLoader(str(TEMPLATES_DIR)))

        kwargs: dict[str, Any] = {
            "autoescape": select_autoescape(default=False),
            "trim_blocks": True,
            "lstrip_blocks": True,
            "keep_trailing_newline": True,
        }
        if loaders:
            kwargs["loader"] = ChoiceLoader(loaders) if len(loaders) > 1 else loaders[0]
        self.env = Environment(**kwargs)

        register_all_filters(self.env)

    def render_template(self, template_name: str, **context: Any) -> str:
        """
        Render a template from a file.

        Args:
            template_name: Name of the template file
            **context: Template context variables

        Returns:
            Rendered string
        """
        template = self.env.get_template(template_name)
        return template.render(**context)

    def render_lines(self, template_name: str, **context: Any) -> list[str]:
        """Render a template and split the result into lines."""
        return self.render_template(template_name, **context).splitlines()


_default_engine: TemplateEngine | None = None


def get_engine() -> TemplateEngine:
    """Return a shared engine loaded with the package templates."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine()
    return _default_engine
