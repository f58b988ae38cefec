'''
bit-twiddling (u16, u32, split fields) y lectura de literales numéricos
'''

from __future__ import annotations
from typing import Tuple

from .diagnostics import ImmediateOutOfRange, InvalidImmediate

# Máscaras sin signo
U16_MASK = 0xFFFF
U32_MASK = 0xFFFFFFFF

def u16(x: int) -> int:
    """Fuerza el valor al rango de 16 bits sin signo."""
    return x & U16_MASK

def u32(x: int) -> int:
    """Fuerza el valor al rango de 32 bits sin signo."""
    return x & U32_MASK

def is_unsigned_nbit(x: int, n: int) -> bool:
    """Devuelve True si x está en [0, 2^n) (sin signo de n bits)."""
    if n <= 0:
        raise ValueError("n debe ser positivo")
    return 0 <= x < (1 << n)

def parse_number(token: str, bits: int = 16) -> int:
    """Convierte un literal sin signo a int: '0x' hexadecimal, '0b' binario, si no decimal.

    Lanza InvalidImmediate si el texto no es un número y ImmediateOutOfRange si no
    cabe en `bits` bits.
    """
    t = token.strip()
    if t.startswith("0x"):
        digits, base = t[2:], 16
    elif t.startswith("0b"):
        digits, base = t[2:], 2
    else:
        digits, base = t, 10
    # int() acepta signos, espacios, '_' y dígitos Unicode; aquí sólo ASCII
    if not digits or not digits.isascii() or not digits.isalnum():
        raise InvalidImmediate(f"Inmediato inválido: '{token}'")
    try:
        value = int(digits, base)
    except ValueError:
        raise InvalidImmediate(f"Inmediato inválido: '{token}'") from None
    if not is_unsigned_nbit(value, bits):
        raise ImmediateOutOfRange(f"Inmediato {token} no cabe en {bits} bits")
    return value

def to_hex16(x: int, *, prefix: bool = True) -> str:
    """Representación hexadecimal de 16 bits (cadena), con o sin prefijo 0x."""
    s = format(u16(x), "04x")
    return ("0x" + s) if prefix else s

def to_hex32(x: int, *, prefix: bool = True) -> str:
    """Representación hexadecimal de 32 bits (cadena), con o sin prefijo 0x."""
    s = format(u32(x), "08x")
    return ("0x" + s) if prefix else s

def split_bits(value: int, positions: Tuple[Tuple[int, int], ...]) -> tuple[int, ...]:
    """Extrae campos de bits dados como rangos (hi, lo) inclusivos (base 0)."""
    out = []
    for hi, lo in positions:
        if hi < lo or hi < 0 or lo < 0:
            raise ValueError("rango de bits inválido")
        width = hi - lo + 1
        field = (value >> lo) & ((1 << width) - 1)
        out.append(field)
    return tuple(out)
