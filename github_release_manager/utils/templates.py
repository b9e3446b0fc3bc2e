"""Contains utilities for rendering Jinja2 templates."""

from pathlib import Path
from typing import Any

import jinja2
import structlog

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

TEMPLATES_DIRECTORY = Path(__file__).parent.parent / "templates"


def construct_jinja2_environment() -> jinja2.Environment:
    """Construct a Jinja2 environment that loads the bundled templates."""
    jinja_env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(TEMPLATES_DIRECTORY),
        undefined=jinja2.StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
    )
    return jinja_env


def get_bundled_template(name: str, environment: jinja2.Environment | None = None) -> jinja2.Template:
    """Load one of the templates shipped with the package."""
    if environment is None:
        environment = construct_jinja2_environment()
    try:
        return environment.get_template(name)
    except jinja2.TemplateNotFound:
        logger.error("Jinja2 template not found", template_name=name, templates_directory=str(TEMPLATES_DIRECTORY))
        raise


def render_template(template: jinja2.Template, context: dict[str, Any]) -> str:
    """Render a Jinja2 template against a context dictionary."""
    try:
        rendered_template = template.render(context)
    except jinja2.UndefinedError as exc:
        logger.error("Failed to render template", template_name=template.name, error=str(exc))
        raise
    return rendered_template
