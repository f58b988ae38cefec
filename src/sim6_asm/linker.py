# src/sim6_asm/linker.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List

from .diagnostics import AsmError, Diagnostic, UnknownDirective, warning
from .directives import data_size
from .isa import INSTR_SIZE, SPEC
from .lexer import section_marker, split_label, split_tokens

# ---------- Constantes de layout ----------

DATA_BASE = 0x9000
CODE_BASE = 0x5800

# ---------- Resultados de la pasada 1 ----------

@dataclass(frozen=True)
class LinkResult:
    symtab: Dict[str, int]
    data_base: int
    code_base: int
    data_size: int
    code_size: int
    diagnostics: List[Diagnostic]

# ---------- Helpers internos ----------

def _instr_size(text: str) -> int:
    # un mnemónico desconocido se reporta en la pasada 2
    tokens = split_tokens(text)
    op = SPEC.get(tokens[0].lower()) if tokens else None
    return op.size if op is not None else INSTR_SIZE

# ---------- Pasada 1 (etiquetas y direcciones por sección) ----------

def first_pass(
    lines: Iterable[str],
    *,
    data_base: int = DATA_BASE,
    code_base: int = CODE_BASE,
) -> LinkResult:
    """Recorre todas las líneas una vez y asigna dirección a cada etiqueta.

    Empieza en la sección de datos; la línea '.code' pasa (para siempre) a la de
    código. Cada sección tiene su propio contador de posición. Una etiqueta
    redefinida se queda con la última definición y genera una advertencia.
    """
    symtab: Dict[str, int] = {}
    diags: List[Diagnostic] = []

    data_mode = True
    lc_data = 0
    lc_code = 0

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        try:
            # Cambios de sección
            marker = section_marker(line)
            if marker == "code":
                data_mode = False
                continue
            if marker == "data":
                if not data_mode:
                    raise UnknownDirective("No se puede volver a .data después de .code")
                continue

            # Etiquetas: 'name:' y 'name: <resto>'
            label, rest = split_label(line)
            if label is not None:
                addr = (data_base + lc_data) if data_mode else (code_base + lc_code)
                if label in symtab:
                    diags.append(warning(f"Etiqueta redefinida: {label}; se usa la última definición",
                                         line=lineno))
                symtab[label] = addr
                if not rest:
                    continue

            if data_mode:
                lc_data += data_size(rest)
            else:
                lc_code += _instr_size(rest)
        except AsmError as ex:
            raise ex.at(lineno, line)

    return LinkResult(
        symtab=symtab,
        data_base=data_base, code_base=code_base,
        data_size=lc_data, code_size=lc_code,
        diagnostics=diags,
    )
