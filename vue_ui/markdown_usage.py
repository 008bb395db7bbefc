import logging
import re
from typing import List, Optional, Sequence

from markdown_it import MarkdownIt
from markdown_it.token import Token

logger = logging.getLogger(__name__)

USAGE_HEADING = "Usage"
COMPONENT_PREVIEW_RE = re.compile(r'<ComponentPreview\s+name="([^"]+)"\s*/>')


def _heading_text(tokens: List[Token], index: int) -> str:
    """Text of the inline token that follows a heading_open token."""
    if index + 1 < len(tokens) and tokens[index + 1].type == "inline":
        return tokens[index + 1].content.strip()
    return ""


def _section_bounds(tokens: List[Token], heading: str) -> Optional[tuple]:
    """
    Line range (start, end) of the body of the first `## heading` section.
    `start` is the first line after the heading and `end` is the line of the next
    level-2 heading, or None when the section runs to the end of the document.
    """
    start = None
    for i, token in enumerate(tokens):
        if token.type != "heading_open" or token.tag != "h2" or not token.map:
            continue
        if start is None:
            if _heading_text(tokens, i) == heading:
                start = token.map[1]
        elif token.map[0] >= start:
            return start, token.map[0]
    if start is None:
        return None
    return start, None


def extract_vue_code_blocks(markdown_content: str, heading: str = USAGE_HEADING) -> List[str]:
    """
    Returns the contents of ```vue fenced blocks found inside the `## Usage` section
    of a markdown document, in document order.
    """
    tokens = MarkdownIt("commonmark").parse(markdown_content or "")
    bounds = _section_bounds(tokens, heading)
    if bounds is None:
        logger.debug("No '%s' section found in markdown document", heading)
        return []

    start, end = bounds
    blocks = []
    for token in tokens:
        if token.type != "fence" or not token.map:
            continue
        line = token.map[0]
        if line < start or (end is not None and line >= end):
            continue
        lang = token.info.strip().split(" ")[0] if token.info else ""
        if lang == "vue":
            blocks.append(token.content.rstrip("\n"))
    return blocks


def replace_component_previews(doc: str, demos: Sequence) -> str:
    """
    Replaces every <ComponentPreview name="X" /> tag with a vue code block holding
    the code of demo X. Tags without a matching demo are left as they are.
    """
    if not demos:
        return doc
    codes = {demo.name: demo.code for demo in demos}

    def _substitute(match: "re.Match") -> str:
        code = codes.get(match.group(1))
        if code:
            return f"```vue\n{code}\n```"
        return match.group(0)

    return COMPONENT_PREVIEW_RE.sub(_substitute, doc)
