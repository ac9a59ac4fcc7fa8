"""
Form Data Marshaling Module

Turns key/value form data into the XML data document that XDP templates
bind against, and extracts form fields from request parameters.
"""

from typing import Any, Dict, Iterable, List, Mapping, Tuple
from xml.sax.saxutils import escape
import re

from .exceptions import InvalidArgumentError


XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
ROOT_ELEMENT = "form"

_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}

# Element names: letter or underscore first, then letters, digits, '.', '-', '_'
_XML_NAME = re.compile(r'[A-Za-z_][A-Za-z0-9._\-]*')


def escape_xml(text: Any) -> str:
    """Escape &, <, >, " and ' for use in XML text. None becomes ''."""
    if text is None:
        return ""
    return escape(str(text), _QUOTE_ENTITIES)


def _element(name: str, value: Any) -> str:
    return f"<{name}>{escape_xml(value)}</{name}>"


def build_xml_data(form_data: Mapping[str, Any]) -> str:
    """
    Build the XML data document for a template.

    Each field becomes a child of <form>; list and tuple values repeat the
    element once per item.

    Raises:
        InvalidArgumentError: If a field name is not a legal XML element name
    """
    parts = [XML_DECLARATION, f"<{ROOT_ELEMENT}>"]

    for key, value in form_data.items():
        if not isinstance(key, str) or not _XML_NAME.fullmatch(key):
            raise InvalidArgumentError(f"Invalid form field name: {key!r}")

        if isinstance(value, (list, tuple)):
            parts.extend(_element(key, item) for item in value)
        else:
            parts.append(_element(key, value))

    parts.append(f"</{ROOT_ELEMENT}>")
    return "".join(parts)


def content_root_for(template_path: str) -> str:
    """Directory part of a template path, used to resolve relative assets"""
    index = template_path.rfind('/')
    if index < 0:
        return ""
    return template_path[:index]


def extract_form_data(params: Iterable[Tuple[str, str]],
                      reserved: Iterable[str] = ()) -> Dict[str, Any]:
    """
    Collect request parameters into form data.

    Args:
        params: (name, value) pairs in request order, repeats allowed
        reserved: Parameter names that control the request and are skipped

    Returns:
        Field name to value; repeated parameters map to a list of values
    """
    skipped = set(reserved)
    collected: Dict[str, List[str]] = {}

    for key, value in params:
        if key in skipped:
            continue
        collected.setdefault(key, []).append(value)

    return {
        key: values[0] if len(values) == 1 else values
        for key, values in collected.items()
    }
