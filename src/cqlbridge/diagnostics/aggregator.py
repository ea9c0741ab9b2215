"""
Diagnostics Aggregator — Condenses engine error lists for people.

Messages that differ only in detail (which type, which namespace) are
grouped under a short label. Severity is not interpreted: any
diagnostic means the compilation failed.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Iterable

from cqlbridge.diagnostics.context import SourceContext


DEFAULT_DISPLAY_LIMIT = 10

# Checked in order; first match wins
KNOWN_PATTERNS: list[tuple[re.Pattern, str]] = [
    (re.compile(r"could not resolve model info provider", re.IGNORECASE),
     "Model info provider not resolved"),
    (re.compile(r"could not resolve model with namespace", re.IGNORECASE),
     "Model namespace not resolved"),
    (re.compile(r"could not resolve type name", re.IGNORECASE),
     "Type name not resolved"),
    (re.compile(r"could not (?:resolve|find) type", re.IGNORECASE),
     "Type resolution failed"),
]


def normalize_message(message: str) -> str:
    """Map a message onto its canonical label, or return it unchanged."""
    for pattern, label in KNOWN_PATTERNS:
        if pattern.search(message):
            return label
    return message


@dataclass
class DiagnosticGroup:
    """Messages sharing one normalized label."""
    label: str
    count: int = 0
    example: str = ""


def group_diagnostics(diagnostics: Iterable[Any]) -> list[DiagnosticGroup]:
    """
    Group diagnostics by normalized label.

    Groups keep the order in which their label first appeared.
    """
    groups: dict[str, DiagnosticGroup] = {}
    for diagnostic in diagnostics:
        message = str(diagnostic)
        label = normalize_message(message)
        group = groups.get(label)
        if group is None:
            group = groups[label] = DiagnosticGroup(label=label, example=message)
        group.count += 1
    return list(groups.values())


@dataclass
class DiagnosticsReport:
    """
    Bounded, de-duplicated report of an engine's diagnostics.

    Usage:
        report = DiagnosticsReport.from_diagnostics(binding.get_errors(handle))
        if not report.is_success:
            print(report.render_short())
    """
    messages: list[str] = field(default_factory=list)
    groups: list[DiagnosticGroup] = field(default_factory=list)

    @classmethod
    def from_diagnostics(cls, diagnostics: Iterable[Any]) -> "DiagnosticsReport":
        messages = [str(d) for d in diagnostics]
        return cls(messages=messages, groups=group_diagnostics(messages))

    @property
    def is_success(self) -> bool:
        return not self.messages

    @property
    def total(self) -> int:
        return len(self.messages)

    def distinct_messages(self) -> list[str]:
        """Raw messages with duplicates removed, first occurrence kept."""
        return list(dict.fromkeys(self.messages))

    def summary(self) -> str:
        return f"Translation failed due to {self.total} errors:"

    def render_short(self, limit: int = DEFAULT_DISPLAY_LIMIT) -> str:
        """
        First `limit` distinct messages plus a remainder line.

        The remainder counts every diagnostic not listed.
        """
        shown = self.distinct_messages()[:limit]
        lines = [self.summary()]
        lines.extend(f"  {i}. {message}" for i, message in enumerate(shown, 1))
        remaining = self.total - len(shown)
        if remaining > 0:
            lines.append(f"  ... and {remaining} more errors")
        return "\n".join(lines)

    def render_verbose(self, context: SourceContext | None = None) -> str:
        """Full grouped table, plus source context when given."""
        lines = [self.summary()]
        width = max([5] + [len(str(g.count)) for g in self.groups])
        lines.append(f"  {'Count':>{width}}  Message")
        for group in self.groups:
            lines.append(f"  {group.count:>{width}}  {group.label}")
            if group.label != group.example:
                lines.append(f"  {'':>{width}}    e.g. {group.example}")
        if context is not None:
            lines.append("")
            lines.append(context.render())
        return "\n".join(lines)
