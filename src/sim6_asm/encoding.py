# src/sim6_asm/encoding.py
from __future__ import annotations
from dataclasses import dataclass

from .ast import Instruction, LargeImm
from .utils import u16, u32

# ---------------- Resultado de codificación ----------------

@dataclass(frozen=True)
class Encoded:
    word: int     # u16 (Regular) o u32 (Long)
    size: int     # 2 o 4 bytes

    @property
    def is_long(self) -> bool:
        return self.size == 4

    def to_bytes(self) -> bytes:
        return self.word.to_bytes(self.size, "big")

# ---------------- Helpers de empaquetado de bits ----------------

def _header(ins: Instruction) -> int:
    """Cabecera de 10 bits en los bits 15..6: opcode, high, low, set_flags, signed."""
    return u16((ins.opcode.code & 0x3F) << 10 |
               int(ins.high)      << 9 |
               int(ins.low)       << 8 |
               int(ins.set_flags) << 7 |
               int(ins.signed)    << 6)

def _pack_regular(header: int, a_code: int, b_code: int) -> int:
    # b_code va sin desplazar: un inmediato corto >= 8 se solapa con el campo de A
    return u16(header | (a_code & 0x7) << 3 | b_code)

def _pack_long(header: int, a_code: int, imm16: int) -> int:
    return u32((header | (a_code & 0x7)) << 16 | (imm16 & 0xFFFF))

# ---------------- Codificador ----------------

def encode_instruction(ins: Instruction) -> Encoded:
    """Empaqueta una instrucción validada en su palabra Regular (16) o Long (32)."""
    header = _header(ins)
    if isinstance(ins.b, LargeImm):
        return Encoded(_pack_long(header, ins.a.code, ins.b.value), 4)
    return Encoded(_pack_regular(header, ins.a.code, ins.b.code), 2)
