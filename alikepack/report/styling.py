"""Terminal and HTML styling of report text through ``rich``."""

from __future__ import annotations

import io

from rich.console import Console
from rich.text import Text

from alikepack.core.renderable import Renderable
from alikepack.core.types import Formatting

# Wide enough that rich never wraps a report line.
_CONSOLE_WIDTH = 4096

HIGHLIGHT_STYLES: dict[str, str] = {
    "ARRAY": "bold color(75)",
    "BOOLNUM": "color(141)",
    "DOM": "color(80)",
    "ERROR": "color(203)",
    "EXCEPTION": "bold color(203)",
    "FUNCTION": "color(39)",
    "NULLISH": "color(244)",
    "OBJECT": "bold color(215)",
    "REGEXP": "color(178)",
    "STRING": "color(114)",
    "SYMBOL": "color(80)",
}

STATUS_STYLES: dict[str, str] = {
    "FAIL": "color(198) on color(52)",
    "PASS": "color(40) on color(22)",
    "PENDING": "color(226) on color(58)",
    "UNEXPECTED_EXCEPTION": "bold color(198) on color(52)",
}

_HTML_FORMAT = (
    '<pre class="alikekit" style="font-family:monospace;color:{foreground};'
    'background-color:{background}"><code>{code}</code></pre>\n'
)


def highlighted_text(renderable: Renderable) -> Text:
    text = Text(renderable.text)
    for highlight in renderable.highlights:
        text.stylize(HIGHLIGHT_STYLES[highlight.kind], highlight.start, highlight.stop)
    return text


def _console(*, record: bool) -> Console:
    return Console(
        file=io.StringIO(),
        record=record,
        force_terminal=True,
        color_system="256",
        no_color=False,
        width=_CONSOLE_WIDTH,
        soft_wrap=True,
        highlight=False,
        markup=False,
        emoji=False,
        legacy_windows=False,
    )


def export_document(document: Text, formatting: Formatting) -> str:
    """Serialize a styled report for ``PLAIN``, ``ANSI`` or ``HTML`` output."""
    if formatting == "PLAIN":
        return document.plain

    if formatting == "ANSI":
        console = _console(record=False)
        console.print(document, end="")
        return console.file.getvalue()

    if formatting == "HTML":
        console = _console(record=True)
        console.print(document, end="")
        return console.export_html(inline_styles=True, code_format=_HTML_FORMAT)

    raise ValueError(f"export_document() cannot produce {formatting} output")
