'''
registros Sim6: familias, mitades alta/baja, código de ancho empaquetado
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional

from .diagnostics import InvalidRegisterOperand, UnknownRegister

@dataclass(frozen=True)
class Register:
    """Registro de la máquina.

    - family: código de familia de 3 bits (A=0 .. Sp=7), None para pc/st
    - width: 'x' (16 bits), 'h' (mitad alta), 'l' (mitad baja) o '' (none/pc/st)
    """
    name: str
    family: Optional[int]
    width: str = ""

    @property
    def is_high(self) -> bool:
        return self.width in ("x", "h")

    @property
    def is_low(self) -> bool:
        return self.width in ("x", "l")

    def __str__(self) -> str:
        return self.name

NONE = Register("none", 0)
AX, AH, AL = Register("ax", 0, "x"), Register("ah", 0, "h"), Register("al", 0, "l")
BX, BH, BL = Register("bx", 1, "x"), Register("bh", 1, "h"), Register("bl", 1, "l")
CX, CH, CL = Register("cx", 2, "x"), Register("ch", 2, "h"), Register("cl", 2, "l")
DX, DH, DL = Register("dx", 3, "x"), Register("dh", 3, "h"), Register("dl", 3, "l")
RP = Register("rp", 4, "x")   # return pointer
FP = Register("fp", 5, "x")   # frame pointer
BP = Register("bp", 6, "x")   # base pointer
SP = Register("sp", 7, "x")   # stack pointer
PC = Register("pc", None)     # program counter
ST = Register("st", None)     # status flags

# Nombres aceptados en el fuente; 'st' existe pero no se puede escribir
REGISTERS: Dict[str, Register] = {
    r.name: r for r in (
        NONE, AX, AH, AL, BX, BH, BL, CX, CH, CL, DX, DH, DL, RP, FP, BP, SP, PC,
    )
}

def parse_register(token: str) -> Register:
    """Devuelve el registro por nombre (sin distinguir mayúsculas) o lanza UnknownRegister."""
    t = token.strip().lower()
    if t in REGISTERS:
        return REGISTERS[t]
    raise UnknownRegister(f"Registro inválido: {token}")

def family_code(reg: Register) -> int:
    """Código de familia 0..7; pc y st no tienen codificación como operando."""
    if reg.family is None:
        raise InvalidRegisterOperand(f"El registro {reg} no puede usarse como operando")
    return reg.family

def is_high(reg: Register) -> bool:
    return reg.is_high

def is_low(reg: Register) -> bool:
    return reg.is_low

def reg_code(reg_a: Register, reg_b: Register) -> int:
    """Código de ancho de 4 bits: [low_a, high_a, low_b, high_b]."""
    code_a = (reg_a.is_low << 3) | (reg_a.is_high << 2)
    code_b = (reg_b.is_low << 1) | reg_b.is_high
    return code_a | code_b
