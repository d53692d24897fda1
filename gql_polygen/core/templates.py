"""Jinja2 environment shared by the emitter plugins.

Supports custom templates via a template directory:
    env = create_environment(template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

from functools import lru_cache
from pathlib import Path

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .utils import (
    constant_to_camel_case,
    doc_comment,
    indent,
    lower_first,
    section_header,
    to_camel_case,
    to_pascal_case,
    to_screaming_snake_case,
    to_snake_case,
)


@lru_cache(maxsize=None)
def create_environment(template_dir: str | None = None) -> Environment:
    """Build the template environment.

    Templates in template_dir take precedence over built-in templates.
    Environments are cached per directory; they hold no per-run state.
    """
    loaders = []
    if template_dir:
        template_path = Path(template_dir)
        if template_path.is_dir():
            loaders.append(FileSystemLoader(str(template_path)))
    loaders.append(PackageLoader("gql_polygen", "templates"))

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=select_autoescape(),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    # Register custom filters
    env.filters["snake_case"] = to_snake_case
    env.filters["pascal_case"] = to_pascal_case
    env.filters["camel_case"] = to_camel_case
    env.filters["upper_case"] = to_screaming_snake_case
    env.filters["constant_camel"] = constant_to_camel_case
    env.filters["lower_first"] = lower_first
    env.filters["doc_comment"] = doc_comment
    env.filters["indent_code"] = indent
    env.globals["section_header"] = section_header
    return env


def render_template(template_name: str, context: dict, template_dir: str | None = None) -> str:
    """Render a template with the given context."""
    template = create_environment(template_dir).get_template(template_name)
    return template.render(context)
