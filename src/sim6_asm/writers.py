from __future__ import annotations
from typing import Iterable, List

from .ast import Data, Instruction, Node
from .encoding import encode_instruction
from .linker import CODE_BASE
from .utils import to_hex16, to_hex32

DATA_MARKER = b".data:"
CODE_MARKER = b".code:"

def emit(nodes: Iterable[Node]) -> bytes:
    """Serializa la imagen: marcador de datos, datos, marcador de código (una vez), código."""
    out = bytearray(DATA_MARKER)
    in_code = False
    for n in nodes:
        if isinstance(n, Data):
            out += bytes(n.bytes)
            continue
        if not in_code:
            in_code = True
            out += CODE_MARKER
        out += encode_instruction(n).to_bytes()
    return bytes(out)

def to_hex_lines(nodes: Iterable[Node], *, code_base: int = CODE_BASE) -> List[str]:
    """Listado 'dirección: palabra  instrucción' de la sección de código."""
    lines = []
    addr = code_base
    for n in nodes:
        if not isinstance(n, Instruction):
            continue
        enc = encode_instruction(n)
        word = to_hex32(enc.word) if enc.is_long else to_hex16(enc.word)
        lines.append(f"{to_hex16(addr)}: {word}  {n}")
        addr += enc.size
    return lines

def write_object(image: bytes, path: str) -> None:
    with open(path, "wb") as f:
        f.write(image)

def write_hex(nodes: Iterable[Node], path: str, *, code_base: int = CODE_BASE) -> None:
    lines = to_hex_lines(nodes, code_base=code_base)
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
