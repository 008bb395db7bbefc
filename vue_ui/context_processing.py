from typing import Any, Dict, List, Optional

from vue_ui.docs import NO_DOCUMENTATION
from vue_ui.metadata import ComponentMetadata


def format_stats_for_text_output(stats_dict: Dict[str, Any], title: str = "Stats") -> str:
    """Formats a dictionary of stats into a readable block."""
    if not stats_dict:
        return ""
    lines = [f"\n--- {title} ---"]
    for key, value in stats_dict.items():
        if isinstance(value, float):
            value_str = f"{value:.2f}"
        else:
            value_str = str(value)
        lines.append(f"{key.replace('_', ' ').capitalize()}: {value_str}")
    return "\n".join(lines)


def _format_doc_entries(entries: List[Dict[str, Any]]) -> List[str]:
    blocks = []
    for entry in entries:
        name = entry.get("name", "UNKNOWN_COMPONENT")
        doc: Optional[str] = entry.get("doc")
        necessity = entry.get("necessity")
        justification = entry.get("justification")

        header = f"### {name}"
        if necessity:
            header += f" ({necessity})"
        parts = [header]
        if justification:
            parts.append(f"> {justification}")
        parts.append(doc.strip() if doc else NO_DOCUMENTATION)
        blocks.append("\n\n".join(parts))
    return blocks


def convert_to_structured_markdown(filtered: Dict[str, List[Dict[str, Any]]]) -> str:
    """
    Renders fetched documentation for the filtered components and charts as one
    markdown document, one section per kind and one subsection per entry.
    """
    sections = ["# Filtered Components Documentation"]
    for kind, title in (("components", "Components"), ("charts", "Charts")):
        entries = filtered.get(kind) or []
        if not entries:
            continue
        sections.append(f"## {title}")
        sections.extend(_format_doc_entries(entries))
    if len(sections) == 1:
        sections.append("No components or charts were selected.")
    return "\n\n".join(sections)


def format_component_metadata(name: str, files: List[Any], metadata: List[ComponentMetadata]) -> str:
    """Lists a component's exported files with the dependencies found in each."""
    lines = [f"COMPONENT: {name}"]
    if files:
        lines.append("EXPORTS:")
        for export in files:
            lines.append(f"- {export.export_name} ({export.file_name})")

    for item in sorted(metadata, key=lambda m: m.file_name):
        lines.append(f"\nFILE: {item.file_name} (sha256 {item.source_hash[:12]})")
        deps = item.dependencies
        for label, values in (
            ("components", deps.components),
            ("utilities", deps.utilities),
            ("styles", deps.styles),
        ):
            if values:
                lines.append(f"- {label}: {', '.join(values)}")
        if not (deps.components or deps.utilities or deps.styles):
            lines.append("- no local dependencies")
    return "\n".join(lines)
