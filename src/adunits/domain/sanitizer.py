"""Allow-list HTML sanitizer for placement markup."""

from __future__ import annotations

from collections.abc import Mapping
from html import escape
from html.parser import HTMLParser

# Elements whose text content is dropped along with the tag.
_DROP_CONTENT = frozenset({"script", "style"})
_VOID_ELEMENTS = frozenset({"br", "hr", "img", "input", "meta", "link"})

PLACEMENT_ALLOWED: Mapping[str, frozenset[str]] = {
    "div": frozenset({"class", "data-adunit", "data-size-mapping", "data-dimensions"}),
}


class _AllowListParser(HTMLParser):
    def __init__(self, allowed: Mapping[str, frozenset[str]]) -> None:
        super().__init__(convert_charrefs=True)
        self._allowed = allowed
        self._out: list[str] = []
        self._open: list[str] = []
        self._dropping = 0

    def handle_starttag(self, tag, attrs):
        if tag in _DROP_CONTENT:
            self._dropping += 1
            return
        if self._dropping or tag not in self._allowed:
            return
        permitted = self._allowed[tag]
        rendered = "".join(
            f' {name}="{escape(value or "", quote=True)}"'
            for name, value in attrs
            if name in permitted
        )
        self._out.append(f"<{tag}{rendered}>")
        if tag not in _VOID_ELEMENTS:
            self._open.append(tag)

    def handle_startendtag(self, tag, attrs):
        if self._dropping or tag in _DROP_CONTENT or tag not in self._allowed:
            return
        self.handle_starttag(tag, attrs)
        if tag not in _VOID_ELEMENTS:
            self.handle_endtag(tag)

    def handle_endtag(self, tag):
        if tag in _DROP_CONTENT:
            self._dropping = max(0, self._dropping - 1)
            return
        if self._dropping or tag not in self._open:
            return
        # Close anything left open inside this element.
        while self._open:
            current = self._open.pop()
            self._out.append(f"</{current}>")
            if current == tag:
                break

    def handle_data(self, data):
        if not self._dropping:
            self._out.append(escape(data, quote=False))

    def result(self) -> str:
        self.close()
        while self._open:
            self._out.append(f"</{self._open.pop()}>")
        return "".join(self._out)


def sanitize(markup: str, allowed: Mapping[str, frozenset[str]] = PLACEMENT_ALLOWED) -> str:
    """Strip every tag and attribute not in ``allowed``; never raises on bad markup."""
    parser = _AllowListParser(allowed)
    parser.feed(markup)
    return parser.result()
