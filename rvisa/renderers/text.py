"""Terminal renderer.

Produces the classic report with rich console markup.  The command line
prints the result through :class:`rich.console.Console`, which turns the
markup into colours on a terminal and strips it elsewhere.
"""

from __future__ import annotations

from typing import List, Sequence

from rich.markup import escape

from ..benchmark import BenchmarkResult
from ..extensions import ExtensionKind
from ..formatter import (
    NAME_COLUMN,
    SUPPORTED_MARK,
    align_pairs,
    compact_sections,
    explained_sections,
    flagged_sections,
    format_vector,
)
from ..hardware import format_harts, format_memory, format_uptime
from ..logos import get_logo
from ..model import HostReport
from .base import InfoRenderer, RenderOptions, kind_views, renderer_registry

SEPARATOR = "-" * 32

# Label colour per extension kind
KIND_STYLE = {
    ExtensionKind.STANDARD: "bright_yellow",
    ExtensionKind.Z: "bright_yellow",
    ExtensionKind.S: "bright_magenta",
}


def _field(label: str, value: str, style: str = "bright_cyan") -> str:
    return f"[bold {style}]{escape(label)}[/] [white]{escape(value)}[/]"


@renderer_registry.register("text")
class TextRenderer(InfoRenderer):
    """Render the report as rich-markup text for a terminal."""

    def render_banner(self, options: RenderOptions) -> List[str]:
        logo = get_logo(options.vendor, options.style)
        if not logo:
            return []
        lines = [f"[bold bright_cyan]{escape(line)}[/]" for line in logo.splitlines()]
        lines.append("")
        return lines

    def render_extensions(self, report: HostReport, options: RenderOptions) -> List[str]:
        """Render the extension sections in compact, explained or all mode."""
        lines: List[str] = []
        for kind, view in kind_views(report, options.mode):
            style = KIND_STYLE[kind]
            if options.show_all:
                for label, items in flagged_sections(view, with_description=options.explain):
                    lines.append("")
                    lines.append(f"[bold {style}]{escape(label)}:[/]")
                    width = max([NAME_COLUMN] + [len(name) for _, name, _ in items])
                    for mark, name, desc in items:
                        mark_style = "green" if mark == SUPPORTED_MARK else "bright_black"
                        row = f"  [{mark_style}]{mark}[/] {escape(name):<{width}}"
                        if desc:
                            row += f" {escape(desc)}"
                        lines.append(row.rstrip())
            elif options.explain:
                for label, pairs in explained_sections(view):
                    if kind is not ExtensionKind.STANDARD:
                        lines.append("")
                    lines.append(f"[bold {style}]{escape(label)}:[/]")
                    for row in align_pairs(pairs):
                        lines.append(f"  {escape(row)}")
            else:
                for label, (names,) in compact_sections(view):
                    lines.append(_field(f"{label}:", names, style))
        return lines

    def render_benchmarks(self, results: Sequence[BenchmarkResult]) -> str:
        """Render benchmark scores as a block printed after the report."""
        lines = ["[bold bright_yellow]Running RISC-V Benchmarks...[/]", ""]
        for result in results:
            lines.append(_field(f"{result.label}:", f"{result.score:.2f} {result.unit}", "bright_green"))
        lines.append("")
        lines.append("[bright_black]Benchmark complete.[/]")
        lines.append("")
        return "\n".join(lines)

    def render(self, report: HostReport, options: RenderOptions) -> str:
        lines: List[str] = [""]
        lines.extend(self.render_banner(options))

        lines.append(_field("ISA:", report.isa))
        lines.extend(self.render_extensions(report, options))

        vector = format_vector(report.parsed.vector)
        if vector:
            if report.sysfs_vlen:
                vector += f", VLEN={report.sysfs_vlen}"
            lines.append(_field("Vector:", vector, "bright_magenta"))

        lines.append(_field("Harts:", format_harts(report.hart_count)))
        if report.hardware_ids.any():
            lines.append(_field("HW IDs:", report.hardware_ids.summary(), "bright_green"))
        cache = report.cache.summary()
        if cache:
            lines.append(_field("Cache:", cache))

        system = report.system
        if system is not None and not options.riscv_only:
            lines.append("")
            lines.append(f"[bright_black]{SEPARATOR}[/]")
            lines.append("")
            if system.board:
                lines.append(_field("Board:", system.board, "bright_blue"))
            lines.append(_field("OS:", system.os, "bright_blue"))
            lines.append(_field("Kernel:", system.kernel, "bright_blue"))
            lines.append(_field(
                "Memory:",
                format_memory(system.memory_used_bytes, system.memory_total_bytes),
                "bright_blue",
            ))
            lines.append(_field("Uptime:", format_uptime(system.uptime_seconds), "bright_blue"))
            lines.append(_field("User:", f"{system.user}@{system.hostname}", "bright_blue"))

        lines.append("")
        return "\n".join(lines)
