"""
Source Context — Facts about the input shown with verbose diagnostics.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path

from cqlbridge.resolver import CQL_EXTENSION


# library/using/include declarations at the start of a line
DECLARATION_PATTERN = re.compile(r"^\s*((?:library|using|include)\b[^\r\n]*)", re.MULTILINE)


@dataclass
class SourceContext:
    """Input size, available libraries, and the input's declarations."""
    input_path: Path
    input_size: int | None = None
    library_path: Path | None = None
    sibling_libraries: list[str] = field(default_factory=list)
    declarations: list[str] = field(default_factory=list)

    def render(self) -> str:
        lines = ["Context:"]
        size = f"{self.input_size} bytes" if self.input_size is not None else "unreadable"
        lines.append(f"  Input file: {self.input_path} ({size})")
        lines.append(f"  Library path: {self.library_path}")
        if self.sibling_libraries:
            lines.append(f"  Libraries found ({len(self.sibling_libraries)}):")
            lines.extend(f"    {name}" for name in self.sibling_libraries)
        else:
            lines.append("  Libraries found: none")
        if self.declarations:
            lines.append("  Declarations in input:")
            lines.extend(f"    {decl}" for decl in self.declarations)
        return "\n".join(lines)


def extract_declarations(text: str) -> list[str]:
    """Pull library/using/include lines out of CQL text."""
    return [match.strip() for match in DECLARATION_PATTERN.findall(text)]


def collect_source_context(input_path: Path, library_path: Path | None = None) -> SourceContext:
    """
    Gather verbose diagnostic context.

    Read failures leave the corresponding field empty.
    """
    library_path = library_path or input_path.absolute().parent
    context = SourceContext(input_path=input_path, library_path=library_path)

    try:
        context.input_size = input_path.stat().st_size
        context.declarations = extract_declarations(input_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError):
        pass

    try:
        context.sibling_libraries = sorted(
            p.name for p in library_path.iterdir()
            if p.is_file() and p.suffix == CQL_EXTENSION
        )
    except OSError:
        pass

    return context
