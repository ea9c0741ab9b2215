"""
Library references — Name extraction from engine identifiers.

The engine hands the resolver whatever identifier type its version
uses: a bare string, a versioned identifier object, or something that
only has a textual form.
"""

from typing import Any


# Identity accessors tried in order. Java getters first, then the
# attribute names a Python or Kotlin-style object would use.
ID_ACCESSORS = ("getId", "id")
NAME_ACCESSORS = ("getName", "name")


def _is_text(value: Any) -> bool:
    if isinstance(value, str):
        return True
    # java.lang.String crosses JPype without becoming a Python str
    return type(value).__name__ == "java.lang.String"


def _read_accessor(reference: Any, accessors: tuple[str, ...]) -> str | None:
    for accessor in accessors:
        try:
            member = getattr(reference, accessor, None)
            value = member() if callable(member) else member
        except Exception:
            continue
        if value is not None and _is_text(value):
            text = str(value)
            if text:
                return text
    return None


def extract_library_name(reference: Any) -> str | None:
    """
    Extract a library name from an engine library reference.

    Tries, in order:
    1. The reference itself when it is a string
    2. An id accessor, then a name accessor
    3. The reference's textual form

    Returns None when no name can be produced.
    """
    if reference is None:
        return None

    if _is_text(reference):
        return str(reference) or None

    name = _read_accessor(reference, ID_ACCESSORS)
    if name is None:
        name = _read_accessor(reference, NAME_ACCESSORS)
    if name is not None:
        return name

    try:
        return str(reference) or None
    except Exception:
        return None


def extract_library_version(reference: Any) -> str | None:
    """Version carried by a reference, if any (used for log messages)."""
    if reference is None or _is_text(reference):
        return None
    return _read_accessor(reference, ("getVersion", "version"))
