"""HTML report renderer.

Renders the host report as a standalone HTML page: a summary table
followed by one table per extension category listing every known
extension with a supported marker.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..formatter import SUPPORTED_MARK, flagged_sections, format_vector
from ..hardware import format_harts, format_memory, format_uptime
from ..model import GroupMode, HostReport
from ..vendors import get_default_vendor, get_vendor_info
from .base import InfoRenderer, RenderOptions, kind_views, renderer_registry

# Template directory
TEMPLATES_DIR = Path(__file__).parent / "templates"


@renderer_registry.register("html")
class HtmlReportRenderer(InfoRenderer):
    """Render the report as a static HTML page.

    The page always uses the all-with-flags layout; ``explain`` controls
    whether the description column is filled.
    """

    def __init__(self):
        """Initialize renderer with Jinja2 environment."""
        self._env = Environment(
            loader=FileSystemLoader(TEMPLATES_DIR),
            autoescape=select_autoescape(["html", "jinja2"]),
        )
        self._css = None

    @property
    def css(self) -> str:
        """Load and cache CSS from template file."""
        if self._css is None:
            css_path = TEMPLATES_DIR / "report.css"
            self._css = css_path.read_text(encoding="utf-8")
        return self._css

    def summary_rows(self, report: HostReport, options: RenderOptions) -> List[Dict[str, str]]:
        rows = [{"label": "ISA", "value": report.isa}]
        vector = format_vector(report.parsed.vector)
        if vector:
            rows.append({"label": "Vector", "value": vector})
        rows.append({"label": "Harts", "value": format_harts(report.hart_count)})
        if report.hardware_ids.any():
            rows.append({"label": "HW IDs", "value": report.hardware_ids.summary()})
        if report.cache.summary():
            rows.append({"label": "Cache", "value": report.cache.summary()})
        system = report.system
        if system is not None and not options.riscv_only:
            if system.board:
                rows.append({"label": "Board", "value": system.board})
            rows.append({"label": "OS", "value": system.os})
            rows.append({"label": "Kernel", "value": system.kernel})
            rows.append({
                "label": "Memory",
                "value": format_memory(system.memory_used_bytes, system.memory_total_bytes),
            })
            rows.append({"label": "Uptime", "value": format_uptime(system.uptime_seconds)})
        return rows

    def sections(self, report: HostReport, options: RenderOptions) -> List[Dict[str, Any]]:
        sections = []
        for _, view in kind_views(report, GroupMode.ALL):
            for label, items in flagged_sections(view, with_description=options.explain):
                sections.append({
                    "label": label,
                    "rows": [
                        {
                            "mark": mark,
                            "supported": mark == SUPPORTED_MARK,
                            "name": name,
                            "description": desc or "",
                        }
                        for mark, name, desc in items
                    ],
                })
        return sections

    def render(self, report: HostReport, options: RenderOptions) -> str:
        name, subtitle = get_vendor_info(options.vendor) or get_default_vendor()
        template = self._env.get_template("report.html.jinja2")
        return template.render(
            title=name,
            subtitle=subtitle,
            css=self.css,
            summary=self.summary_rows(report, options),
            sections=self.sections(report, options),
            explain=options.explain,
        )
