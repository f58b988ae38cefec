'''
dataclases de operandos, instrucciones y datos (Reg, ShortImm, LargeImm, Instruction, Data)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union

from .isa import OpSpec
from .regs import Register, NONE, family_code, reg_code

# ---- Operandos ----

@dataclass(frozen=True)
class Reg:
    """Operando registro; aporta su código de familia (0..7)."""
    register: Register

    @property
    def code(self) -> int:
        return family_code(self.register)

    def __str__(self) -> str:
        return str(self.register)

@dataclass(frozen=True)
class ShortImm:
    """Inmediato de 8 bits (la validación lo restringe a 0..31)."""
    value: int

    @property
    def code(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

@dataclass(frozen=True)
class LargeImm:
    """Inmediato de 16 bits (sólo movi)."""
    value: int

    @property
    def code(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

Operand = Union[Reg, ShortImm, LargeImm]

NO_REG = Reg(NONE)

# ---- Nodos que produce la pasada 2 ----

@dataclass(frozen=True)
class Instruction:
    """Instrucción Sim6 ya construida.

    high/low se copian del registro del operando A; signed/set_flags del opcode.
    Usar Instruction.new() en lugar del constructor.
    """
    opcode: OpSpec
    high: bool
    low: bool
    signed: bool
    set_flags: bool
    a: Reg
    b: Operand

    @classmethod
    def new(cls, opcode: OpSpec, a: Operand, b: Operand = NO_REG) -> "Instruction":
        if not isinstance(a, Reg):
            # error de programación, no del fuente
            raise TypeError(f"El operando A debe ser un registro, no {a!r}")
        return cls(
            opcode=opcode,
            high=a.register.is_high,
            low=a.register.is_low,
            signed=opcode.signed,
            set_flags=opcode.set_flags,
            a=a,
            b=b,
        )

    @property
    def register_code(self) -> int:
        """Código de ancho empaquetado de ambos operandos (0 si B es inmediato)."""
        reg_b = self.b.register if isinstance(self.b, Reg) else NONE
        return reg_code(self.a.register, reg_b)

    @property
    def size(self) -> int:
        """Bytes que ocupa codificada (según el opcode)."""
        return self.opcode.size

    def __str__(self) -> str:
        ops = [str(o) for o in (self.a, self.b) if o != NO_REG]
        return f"{self.opcode} {', '.join(ops)}".strip()

@dataclass(frozen=True)
class Data:
    """Bytes emitidos por una directiva de datos."""
    bytes: Tuple[int, ...]

Node = Union[Data, Instruction]
