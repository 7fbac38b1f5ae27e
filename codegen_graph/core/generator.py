"""Code generator for introspected GraphQL schemas.

Renders Jinja2 templates to produce Python code from the intermediate
document built by the emitters.

Supports custom templates via the template_dir parameter:
    generator = CodeGenerator(template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import ast
import json
import re
from pathlib import Path
from typing import Optional

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .document import Document


def snake_case(name: str) -> str:
    """Convert PascalCase or camelCase to snake_case."""
    s1 = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", s1).lower()


def lower_first(name: str) -> str:
    """Lowercase the first character, e.g. TokenDayData -> tokenDayData."""
    return name[:1].lower() + name[1:]


def safe_docstring(text: str) -> str:
    """Escape text for use in docstrings."""
    if not text:
        return ""
    text = text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
    if text.endswith('"'):
        text += " "
    return text


def safe_comment(text: str) -> str:
    """Make text safe for a single-line Python comment.

    Removes newlines and collapses whitespace so the text cannot break
    out of the ``#`` comment it is rendered into.
    """
    if not text:
        return ""
    text = re.sub(r"\s+", " ", text)
    if len(text) > 120:
        text = text[:117] + "..."
    return text.strip()


def quote(value: str) -> str:
    """Render a string as a double-quoted Python literal."""
    return json.dumps(value)


class CodeGenerator:
    """Renders an intermediate document to Python source.

    Templates in template_dir take precedence over built-in templates.

    Available templates to override:
        - module.py.j2: module-level query functions
        - client.py.j2: functions plus a client class bound to a URL
        - _heading.py.j2: imports, option types and MAX_PAGE
        - _types.py.j2: per-entity TypedDict declarations
        - _functions.py.j2: per-entity parser and query functions
    """

    def __init__(self, template_dir: Optional[str] = None):
        """Initialize the code generator.

        Args:
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in templates.
        """
        self.template_dir = template_dir

        # Build template loader - custom templates take precedence
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("codegen_graph", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        # Register custom filters
        self.env.filters["quote"] = quote
        self.env.filters["safe_docstring"] = safe_docstring
        self.env.filters["safe_comment"] = safe_comment

    def render(self, document: Document, template_name: str) -> str:
        """Render a document with the given template.

        Raises:
            ValueError: If the rendered code is not valid Python
        """
        template = self.env.get_template(template_name)
        content = template.render(document=document, heading=document.heading)

        try:
            ast.parse(content)
        except SyntaxError as e:
            raise ValueError(
                f"Generated invalid Python: {e}\nTemplate: {template_name}"
            ) from e
        return content
