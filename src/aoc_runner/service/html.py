"""Flatten puzzle-site HTML into markdown-ish text.

Inline code becomes `code` and links become [text](href), so answers and
navigation links survive as recognisable markers in the cached text.
"""

import re

from bs4 import BeautifulSoup

_BLOCKS = ["h2", "p", "pre", "ul", "ol"]
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")


def page_text(html: str, container: str = "main") -> str:
    """Text of every *container* element, or of the whole page if there is none."""
    soup = BeautifulSoup(html, "html.parser")
    nodes = soup.find_all(container) or [soup.body or soup]

    chunks = []
    for node in nodes:
        for code in node.find_all("code"):
            code.replace_with(f"`{code.get_text()}`")
        for link in node.find_all("a"):
            link.replace_with(f"[{link.get_text()}]({link.get('href', '')})")
        for item in node.find_all("li"):
            item.insert_before("- ")
            item.append("\n")
        for block in node.find_all(_BLOCKS):
            block.append("\n\n")
        chunks.append(node.get_text())

    text = "\n\n".join(chunk.strip() for chunk in chunks)
    return _EXCESS_NEWLINES_RE.sub("\n\n", text).strip()
