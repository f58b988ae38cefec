from __future__ import annotations
import re
from typing import Dict, List, Optional, Tuple

from .diagnostics import InvalidLabel, UnknownLabel

LABEL_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
# candidate label: first token ending in ':' (no spaces or backticks before it)
LABEL_PREFIX_RE = re.compile(r"^([^\s:`]+):(.*)$")
LABEL_REF_RE = re.compile(r"@(\w+)")
SECTION_RE = re.compile(r"^\.(data|code):?$", re.IGNORECASE)

def validate_label(name: str) -> str:
    """Raise InvalidLabel unless name is [A-Za-z_][A-Za-z0-9_]* (ASCII only)."""
    if not LABEL_NAME_RE.match(name):
        raise InvalidLabel(f"Etiqueta con formato inválido: '{name}'")
    return name

def section_marker(line: str) -> Optional[str]:
    """Return 'data' or 'code' if the line is a section marker, else None."""
    m = SECTION_RE.match(line.strip())
    if not m:
        return None
    return m.group(1).lower()

def split_label(line: str) -> Tuple[Optional[str], str]:
    """Return (label, rest) if line starts with 'label:', else (None, line).

    The label name is validated, so '1abc: nop' raises InvalidLabel.
    """
    m = LABEL_PREFIX_RE.match(line.strip())
    if not m:
        return None, line.strip()
    return validate_label(m.group(1)), m.group(2).strip()

def split_tokens(line: str) -> List[str]:
    """Split on whitespace, strip trailing commas and drop tokens left empty."""
    out = []
    for tok in line.split():
        tok = tok.rstrip(",")
        if tok:
            out.append(tok)
    return out

def backtick_text(line: str) -> Optional[str]:
    """Text between the first and last backtick, or None if there are not two."""
    first = line.find("`")
    last = line.rfind("`")
    if first < 0 or last == first:
        return None
    return line[first + 1:last]

def substitute_labels(line: str, symtab: Dict[str, int]) -> str:
    """Replace every '@name' outside backtick strings with its decimal address."""
    def _sub(m: re.Match) -> str:
        name = m.group(1)
        if name not in symtab:
            raise UnknownLabel(f"Etiqueta no definida: {name}")
        return str(symtab[name])

    # mismo tramo que backtick_text: del primer al último acento grave
    first = line.find("`")
    last = line.rfind("`")
    if first < 0 or last == first:
        return LABEL_REF_RE.sub(_sub, line)
    return (LABEL_REF_RE.sub(_sub, line[:first]) + line[first:last + 1]
            + LABEL_REF_RE.sub(_sub, line[last + 1:]))
