"""
Helpers for Vue single-file component source held in strings.
"""

import re
from typing import Any, Dict

_TEMPLATE_RE = re.compile(r"<template[\s\S]*?>([\s\S]*)</template>", re.IGNORECASE)
_SCRIPT_RE = re.compile(r"<script[\s\S]*?>([\s\S]*?)</script>", re.IGNORECASE)
_STYLE_RE = re.compile(r"<style[\s\S]*?>([\s\S]*?)</style>", re.IGNORECASE)

_UNESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "'": "'",
    "\\": "\\",
}
_ESCAPE_SEQUENCE_RE = re.compile(r"\\([ntr\"'\\])")


def deserialize_component_code(escaped_component_code: str) -> str:
    """Turns an escaped component string (literal \\n, \\" ...) back into source code."""
    return _ESCAPE_SEQUENCE_RE.sub(lambda m: _UNESCAPES[m.group(1)], escaped_component_code)


def serialize_component_code(component_code: str) -> str:
    return (
        component_code.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("\t", "\\t")
        .replace("\r", "\\r")
    )


def parse_vue_component(component_code: str) -> Dict[str, Any]:
    template = _TEMPLATE_RE.search(component_code)
    script = _SCRIPT_RE.search(component_code)
    style = _STYLE_RE.search(component_code)
    return {
        "template": template.group(1).strip() if template else "",
        "script": script.group(1).strip() if script else "",
        "style": style.group(1).strip() if style else "",
        "has_template": template is not None,
        "has_script": script is not None,
        "has_style": style is not None,
    }


def is_valid_vue_component(component_code: str) -> bool:
    sections = parse_vue_component(component_code)
    return sections["has_template"] and sections["has_script"]
