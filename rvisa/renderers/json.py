"""JSON renderer.

The field names produced here are relied on by scripts and must not
change.  Two shapes exist:

Default::

    {"isa": "...", "extensions": ["I", "M"], "z_extensions": ["Zicsr"],
     "s_extensions": [], "vector": {"enabled": false, "vlen": null, "elen": null},
     "hart_count": 4, "hardware_ids": {...}, "cache": {...}, ...}

With ``--all`` the three extension arrays hold one object per known
extension instead::

    {"name": "Zicsr", "description": "CSR Instructions",
     "category": "base", "supported": true}

``category`` is only present for Z and S extensions.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Dict, List

from ..extensions import ExtensionKind
from ..model import CategorizedView, GroupMode, HostReport
from .base import InfoRenderer, RenderOptions, kind_views, renderer_registry

ARRAY_FIELDS = {
    ExtensionKind.STANDARD: "extensions",
    ExtensionKind.Z: "z_extensions",
    ExtensionKind.S: "s_extensions",
}


def extension_objects(view: CategorizedView) -> List[Dict[str, Any]]:
    """Serialize every entry of an all-mode view, in catalog order."""
    objects: List[Dict[str, Any]] = []
    for entry in view.entries():
        descriptor = entry.descriptor
        obj: Dict[str, Any] = {
            "name": descriptor.display_name,
            "description": descriptor.description,
        }
        if descriptor.category is not None:
            obj["category"] = descriptor.category.ident
        obj["supported"] = entry.supported
        objects.append(obj)
    return objects


def vector_object(report: HostReport) -> Dict[str, Any]:
    info = report.parsed.vector
    if info is None:
        return {"enabled": False, "vlen": None, "elen": None}
    vlen = report.sysfs_vlen if report.sysfs_vlen else info.min_vlen
    return {"enabled": info.enabled, "vlen": vlen, "elen": info.elen}


def build_payload(report: HostReport, options: RenderOptions) -> Dict[str, Any]:
    """Build the JSON-ready dictionary for ``report``."""
    payload: Dict[str, Any] = {"isa": report.isa}
    if options.show_all:
        for kind, view in kind_views(report, GroupMode.ALL):
            payload[ARRAY_FIELDS[kind]] = extension_objects(view)
    else:
        for kind, field_name in ARRAY_FIELDS.items():
            payload[field_name] = report.parsed.names(kind)

    payload["vector"] = vector_object(report)
    payload["hart_count"] = report.hart_count
    payload["hardware_ids"] = asdict(report.hardware_ids)
    payload["cache"] = asdict(report.cache)

    system = report.system
    if system is not None and not options.riscv_only:
        payload["board"] = system.board
        payload["memory_used_bytes"] = system.memory_used_bytes
        payload["memory_total_bytes"] = system.memory_total_bytes
        payload["kernel"] = system.kernel
        payload["os"] = system.os
        payload["uptime_seconds"] = system.uptime_seconds
    return payload


@renderer_registry.register("json")
class JsonRenderer(InfoRenderer):
    """Render the report as pretty-printed JSON."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def render(self, report: HostReport, options: RenderOptions) -> str:
        return json.dumps(build_payload(report, options), indent=self.indent, ensure_ascii=False)


def not_riscv_error() -> str:
    """JSON document printed when the host is not RISC-V."""
    return json.dumps({"error": "not_riscv", "message": "This system is not RISC-V"})
