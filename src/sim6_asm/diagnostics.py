'''
clase Diagnostic, helpers y errores del ensamblador (AsmError y subclases)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Literal

# Severidad de los diagnósticos (en español)
Severity = Literal["error", "advertencia", "nota"]

_SEV_TO_LABEL = {
    "error": "ERROR",
    "advertencia": "ADVERTENCIA",
    "nota": "NOTA",
}

@dataclass(frozen=True)
class Diagnostic:
    """Estructura de un diagnóstico para reportar problemas.

    Abarca errores, advertencias y notas, con ubicación opcional (archivo y línea)
    y un mensaje de ayuda (pista) para orientar la corrección.
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    hint: Optional[str] = None
    file: Optional[str] = None

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        if self.line is not None:
            loc += f"{self.line}:"
        if loc:
            loc += " "
        sev = _SEV_TO_LABEL.get(self.severity, str(self.severity).upper())
        core = f"{sev}: {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

def error(message: str, *, line: int | None = None,
          file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, line, hint, file)

def warning(message: str, *, line: int | None = None,
            file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo advertencia."""
    return Diagnostic("advertencia", message, line, hint, file)

# ---------- Errores ----------

class AsmError(ValueError):
    """Error fatal de ensamblado.

    Todas las pasadas lanzan subclases de AsmError; la primera aborta la traducción.
    La pasada que procesaba la línea le asigna `line` y `source` con `at()`.
    """
    kind = "AsmError"
    hint: Optional[str] = None

    def __init__(self, message: str, *, line: int | None = None,
                 source: str | None = None, hint: str | None = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.source = source
        if hint is not None:
            self.hint = hint

    def at(self, line: int, source: str | None = None) -> "AsmError":
        """Asigna la ubicación si todavía no la tiene y devuelve el propio error."""
        if self.line is None:
            self.line = line
            self.source = source
        return self

    def to_diagnostic(self, *, file: str | None = None) -> Diagnostic:
        msg = f"[{self.kind}] {self.message}"
        if self.source:
            msg += f" en '{self.source}'"
        return error(msg, line=self.line, file=file, hint=self.hint)

class UnknownOpcode(AsmError):
    kind = "UnknownOpcode"

class UnknownRegister(AsmError):
    kind = "UnknownRegister"

class InvalidLabel(AsmError):
    kind = "InvalidLabel"
    hint = "letra o '_' inicial, luego letras, dígitos o '_'"

class UnknownLabel(AsmError):
    kind = "UnknownLabel"

class UnknownDirective(AsmError):
    kind = "UnknownDirective"
    hint = "directivas válidas: .byte .word .long .array .asciiz"

class ImmediateOutOfRange(AsmError):
    kind = "ImmediateOutOfRange"

class ImmediateTooLarge(AsmError):
    kind = "ImmediateTooLarge"
    hint = "inmediato corto de 5 bits (0..31)"

class InvalidImmediate(AsmError):
    kind = "InvalidImmediate"
    hint = "use decimal, 0x (hex) o 0b (binario)"

class InvalidDirectiveArgument(AsmError):
    kind = "InvalidDirectiveArgument"

class InvalidOperandShape(AsmError):
    kind = "InvalidOperandShape"

class InvalidRegisterCode(AsmError):
    kind = "InvalidRegisterCode"

class InvalidRegisterOperand(AsmError):
    kind = "InvalidRegisterOperand"
