"""Jinja2 rendering of named fragments. Template "x" lives in templates/x.html."""

from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from contactbook.application import (
    TEMPLATE_FORM,
    TEMPLATE_INDEX,
    TEMPLATE_OOB_CONTACT,
    Fragment,
)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

# Name under which each template receives its data.
_CONTEXT_NAMES = {
    TEMPLATE_INDEX: "page",
    TEMPLATE_FORM: "form",
    TEMPLATE_OOB_CONTACT: "contact",
}


@lru_cache(maxsize=1)
def get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_fragment(fragment: Fragment) -> str:
    template = get_env().get_template(f"{fragment.template}.html")
    name = _CONTEXT_NAMES.get(fragment.template, "data")
    return template.render({name: fragment.data})


def render_fragments(fragments: Iterable[Fragment]) -> str:
    """Render fragments in order and concatenate them into one body."""
    return "".join(render_fragment(f) for f in fragments)
