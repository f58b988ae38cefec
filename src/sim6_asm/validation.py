'''
validación de instrucciones: forma de operandos y código de registros por opcode
'''

from __future__ import annotations

from .ast import Instruction, Operand, Reg, ShortImm, LargeImm
from .diagnostics import (
    ImmediateTooLarge,
    InvalidOperandShape,
    InvalidRegisterCode,
    InvalidRegisterOperand,
)
from .isa import (
    NO_OPERAND, ONE_REGISTER, TWO_REGISTER, REG_SHORT_IMM, REG_LARGE_IMM,
)
from .regs import NONE

# Códigos de ancho válidos para dos registros: l/l, h/h, l/h, h/l, x/x
TWO_REGISTER_CODES = (0b1010, 0b0101, 0b1001, 0b0110, 0b1111)

SHORT_IMM_MAX = 0x1F

def _check_operable(ins: Instruction, op: Operand) -> None:
    if isinstance(op, Reg) and op.register.family is None:
        raise InvalidRegisterOperand(f"{ins.opcode}: el registro {op} no puede usarse como operando")

def _require_none(ins: Instruction, op: Operand) -> None:
    if not isinstance(op, Reg):
        raise InvalidOperandShape(f"{ins.opcode}: el operando {op} debería ser un registro")
    if op.register != NONE:
        raise InvalidRegisterOperand(f"{ins.opcode}: el registro {op} debería ser none")

def _require_register(ins: Instruction, op: Operand) -> Reg:
    if not isinstance(op, Reg):
        raise InvalidOperandShape(f"{ins.opcode}: el operando {op} debería ser un registro")
    return op

def _validate_register_pair(ins: Instruction, a: Reg, b: Reg) -> None:
    """Mismo ancho en ambos registros; alta con baja sólo dentro de la misma familia."""
    ra, rb = a.register, b.register
    if ra.width == rb.width:
        return
    if {ra.width, rb.width} == {"h", "l"} and ra.family == rb.family:
        return
    raise InvalidRegisterCode(
        f"{ins.opcode}: los registros {ra} y {rb} son de distinto tamaño o mezclan alta/baja"
    )

def validate_instruction(ins: Instruction) -> None:
    """Comprueba operandos y código de registros; lanza la primera violación."""
    _check_operable(ins, ins.a)
    _check_operable(ins, ins.b)

    shape = ins.opcode.shape
    code = ins.register_code

    if shape == NO_OPERAND:
        if code != 0:
            raise InvalidRegisterCode(f"{code:04b} no es un código de registros válido para {ins.opcode}")
        _require_none(ins, ins.a)
        _require_none(ins, ins.b)

    elif shape == TWO_REGISTER:
        a = _require_register(ins, ins.a)
        b = _require_register(ins, ins.b)
        if code not in TWO_REGISTER_CODES:
            raise InvalidRegisterCode(f"{code:04b} no es un código de registros válido para {ins.opcode}")
        _validate_register_pair(ins, a, b)

    elif shape == ONE_REGISTER:
        a = _require_register(ins, ins.a)
        if a.register == NONE:
            raise InvalidRegisterOperand(f"{ins.opcode}: el registro no debe ser none")
        _require_none(ins, ins.b)

    elif shape == REG_SHORT_IMM:
        if not isinstance(ins.b, ShortImm):
            raise InvalidOperandShape(f"{ins.opcode}: el operando {ins.b} debería ser un inmediato corto")
        if ins.b.value > SHORT_IMM_MAX:
            raise ImmediateTooLarge(f"{ins.opcode}: el inmediato {ins.b.value} es demasiado grande")

    elif shape == REG_LARGE_IMM:
        # un LargeImm no puede salirse de rango: ya se leyó como 16 bits
        if not isinstance(ins.b, LargeImm):
            raise InvalidOperandShape(f"{ins.opcode}: el operando {ins.b} debería ser un inmediato largo")

    else:
        raise ValueError(f"Forma de operandos desconocida: {shape}")
