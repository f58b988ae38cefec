# src/sim6_asm/parser.py
from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Tuple

from .ast import Instruction, Node, Operand, Reg, ShortImm, LargeImm, NO_REG
from .diagnostics import AsmError, ImmediateOutOfRange, InvalidOperandShape, UnknownDirective
from .directives import parse_data
from .isa import OpSpec, REG_LARGE_IMM, spec
from .lexer import section_marker, split_label, split_tokens, substitute_labels
from .regs import parse_register
from .utils import is_unsigned_nbit, parse_number
from .validation import validate_instruction

def _parse_imm(opcode: OpSpec, token: str) -> Operand:
    value = parse_number(token, bits=16)
    if opcode.shape == REG_LARGE_IMM:
        return LargeImm(value)
    if not is_unsigned_nbit(value, 8):
        raise ImmediateOutOfRange(f"Inmediato {token} no cabe en 8 bits")
    return ShortImm(value)

def _parse_operand_b(opcode: OpSpec, token: str) -> Operand:
    # los inmediatos empiezan por dígito decimal (también 0x.. y 0b..)
    if token[0] in "0123456789":
        return _parse_imm(opcode, token)
    return Reg(parse_register(token))

def parse_instruction(text: str) -> Instruction:
    """Convierte 'mnem [a[, b]]' (sin etiqueta) en una Instruction sin validar."""
    tokens = split_tokens(text)
    if not tokens:
        raise InvalidOperandShape("Línea de código vacía")
    if len(tokens) > 3:
        raise InvalidOperandShape(f"Demasiados operandos: {' '.join(tokens[3:])}")

    opcode = spec(tokens[0])
    a = Reg(parse_register(tokens[1])) if len(tokens) > 1 else NO_REG
    b = _parse_operand_b(opcode, tokens[2]) if len(tokens) > 2 else NO_REG
    return Instruction.new(opcode, a, b)

def process_line(
    line: str,
    symtab: Dict[str, int],
    *,
    data_mode: bool,
) -> Tuple[Optional[Node], bool]:
    """Traduce una línea con la tabla de etiquetas completa.

    Devuelve (nodo, data_mode): el nodo es None para marcadores de sección y
    líneas que sólo tienen etiqueta; data_mode pasa a False al ver '.code'.
    """
    core = line.strip()
    marker = section_marker(core)
    if marker == "code":
        return None, False
    if marker == "data":
        if not data_mode:
            raise UnknownDirective("No se puede volver a .data después de .code")
        return None, data_mode

    _, rest = split_label(core)
    if not rest:
        return None, data_mode

    rest = substitute_labels(rest, symtab)
    if data_mode:
        return parse_data(rest), data_mode

    ins = parse_instruction(rest)
    validate_instruction(ins)
    return ins, data_mode

def translate(lines: Iterable[str], symtab: Dict[str, int]) -> List[Node]:
    """PASADA 2: lista de Data/Instruction en orden del fuente."""
    nodes: List[Node] = []
    data_mode = True
    for lineno, raw in enumerate(lines, start=1):
        if not raw.strip():
            continue
        try:
            node, data_mode = process_line(raw, symtab, data_mode=data_mode)
        except AsmError as ex:
            raise ex.at(lineno, raw.strip())
        if node is not None:
            nodes.append(node)
    return nodes
