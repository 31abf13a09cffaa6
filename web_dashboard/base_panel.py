# ============================================================================
# BASE_PANEL
# ============================================================================
# STATUS: Abstract base - Panel contract and HTML helpers
# PURPOSE: Shared rendering helpers for stage progress panels
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: BasePanel, HeaderSpec
# DEPENDENCIES: azure.functions, html
# ============================================================================
"""
Abstract base class for dashboard panels.

A panel is identified by three class attributes (``name``, ``label``,
``order``) so the registry can read them without building an instance.
Subclasses list their ``sections`` and implement ``render_section`` and
``render_fragment``; ``render`` wraps the chosen section for the page.

Exports:
    BasePanel: Abstract base class for all dashboard panels
    HeaderSpec: Table header type, a label or (label, colspan)
"""

from abc import ABC, abstractmethod
from typing import ClassVar, List, Optional, Sequence, Tuple, Union
import azure.functions as func
import html as html_module

# A header is either a label or (label, colspan)
HeaderSpec = Union[str, Tuple[str, int]]


def _esc(value) -> str:
    return html_module.escape(str(value))


class BasePanel(ABC):
    """
    Abstract base for dashboard panels.

    Class attributes:
        name: URL key (?tab=<name>)
        label: Text shown in the tab bar
        order: Position among registered panels, lowest first
        sections: (key, label) pairs; the first one is the default
    """

    name: ClassVar[str] = ""
    label: ClassVar[str] = ""
    order: ClassVar[int] = 99
    sections: ClassVar[List[Tuple[str, str]]] = []

    @abstractmethod
    def render_section(self, request: func.HttpRequest, section: str) -> str:
        """Return the HTML body of one section."""

    @abstractmethod
    def render_fragment(self, request: func.HttpRequest, fragment_name: str) -> str:
        """Return a named fragment, used by HTMX polling."""

    @property
    def default_section(self) -> str:
        return self.sections[0][0] if self.sections else ""

    def resolve_section(self, section: Optional[str]) -> str:
        """Known section keys pass through; anything else maps to the default."""
        if section and section in dict(self.sections):
            return section
        return self.default_section

    def render(self, request: func.HttpRequest) -> str:
        section = self.resolve_section(request.params.get("section"))
        css = self.get_panel_css()
        style = f"<style>{css}</style>" if css else ""
        return f'{style}<div id="panel-content">{self.render_section(request, section)}</div>'

    def get_panel_css(self) -> Optional[str]:
        return None

    # --- HTML helpers ---

    def link(self, url: str, text: str) -> str:
        return f'<a href="{_esc(url)}">{_esc(text)}</a>'

    def data_table(
        self,
        headers: Sequence[HeaderSpec],
        rows: list,
        table_id: str = "data-table",
        cell_classes: Optional[Sequence[str]] = None,
        table_class: str = "data-table",
    ) -> str:
        """
        Render a table with rows in the order given.

        Header labels are escaped; body cells are inserted as-is, so callers
        escape text before passing it in. An empty ``rows`` list still
        produces the header and an empty body. Pass
        ``table_class="data-table sortable"`` to let the page sort columns
        on header click.

        Args:
            headers: Column headers; (label, colspan) merges header cells.
            rows: List of row lists of cell HTML.
            table_id: id attribute of the table.
            cell_classes: Optional CSS class per body column.
            table_class: class attribute of the table.
        """
        head = []
        for header in headers:
            if isinstance(header, tuple):
                label, span = header
                head.append(f'<th colspan="{int(span)}">{_esc(label)}</th>')
            else:
                head.append(f"<th>{_esc(header)}</th>")

        classes = list(cell_classes or [])
        body = []
        for row in rows:
            cells = []
            for index, cell in enumerate(row):
                css = classes[index] if index < len(classes) else ""
                attr = f' class="{_esc(css)}"' if css else ""
                cells.append(f"<td{attr}>{cell}</td>")
            body.append(f"<tr>{''.join(cells)}</tr>")

        body_html = "\n".join(body)
        return (
            f'<table id="{_esc(table_id)}" class="{_esc(table_class)}">\n'
            f'<thead><tr>{"".join(head)}</tr></thead>\n'
            f'<tbody>{body_html}</tbody>\n'
            f'</table>'
        )

    def progress_bar(self, complete_percent: float, started_percent: float) -> str:
        """
        Two segments in one track: finished work, then work in flight.

        Widths above 100% are emitted unchanged; the track hides overflow.
        """
        return (
            f'<div class="progress">'
            f'<div class="bar bar-done" style="width: {complete_percent}%"></div>'
            f'<div class="bar bar-running" style="width: {started_percent}%"></div>'
            f'</div>'
        )

    def stat_strip(self, counts: dict) -> str:
        """One card per label -> value pair, in insertion order."""
        cards = "".join(
            f'<div class="stat-card stat-{str(label).lower().replace(" ", "-")}">'
            f'<div class="stat-value">{_esc(value)}</div>'
            f'<div class="stat-label">{_esc(label)}</div>'
            f'</div>'
            for label, value in counts.items()
        )
        return f'<div class="stat-strip">{cards}</div>'

    def auto_refresh(self, wrapper_id: str, fragment_url: str, seconds: int, content: str) -> str:
        """
        Wrap content in a div that re-fetches ``fragment_url`` every ``seconds``.

        Polling pauses while the browser tab is hidden. ``seconds <= 0``
        gives a plain wrapper with no hx attributes.
        """
        if seconds <= 0:
            return f'<div id="{_esc(wrapper_id)}">\n{content}\n</div>'
        return f"""<div id="{_esc(wrapper_id)}"
     hx-get="{_esc(fragment_url)}"
     hx-trigger="every {int(seconds)}s [document.visibilityState === 'visible']"
     hx-target="this"
     hx-swap="innerHTML">
{content}
</div>"""
