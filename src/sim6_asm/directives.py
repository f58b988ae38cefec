'''
directivas de datos (.byte .word .long .array .asciiz): tamaño y expansión a bytes
'''

from __future__ import annotations
from typing import List

from .ast import Data
from .diagnostics import InvalidDirectiveArgument, UnknownDirective
from .lexer import backtick_text, split_tokens
from .utils import parse_number

DATA_DIRS_SIZED = {".byte": 1, ".word": 2, ".long": 4}
DATA_DIRS = (".byte", ".word", ".long", ".array", ".asciiz")

def _directive(tokens: List[str], text: str) -> str:
    if not tokens:
        raise UnknownDirective(f"Línea de datos vacía: '{text}'")
    d = tokens[0].lower()
    if d not in DATA_DIRS:
        raise UnknownDirective(f"Directiva desconocida: {tokens[0]}")
    return d

def _string(text: str) -> bytes:
    s = backtick_text(text)
    if s is None:
        raise InvalidDirectiveArgument(".asciiz requiere un texto entre `comillas invertidas`")
    return s.encode("utf-8")

def _single_value(d: str, tokens: List[str]) -> str:
    if len(tokens) != 2:
        raise InvalidDirectiveArgument(f"{d} requiere exactamente un valor")
    return tokens[1]

def data_size(text: str) -> int:
    """Bytes que emite la directiva; la pasada 1 avanza la dirección con esto."""
    tokens = split_tokens(text)
    d = _directive(tokens, text)
    if d in DATA_DIRS_SIZED:
        return DATA_DIRS_SIZED[d]
    if d == ".array":
        return len(tokens) - 1
    return len(_string(text)) + 1  # terminador NUL

def parse_data(text: str) -> Data:
    """Expande una línea de datos (sin etiqueta) a sus bytes, big-endian."""
    tokens = split_tokens(text)
    d = _directive(tokens, text)

    if d in DATA_DIRS_SIZED:
        size = DATA_DIRS_SIZED[d]
        value = parse_number(_single_value(d, tokens), bits=8 * size)
        return Data(tuple(value.to_bytes(size, "big")))

    if d == ".array":
        return Data(tuple(parse_number(tok, bits=8) for tok in tokens[1:]))

    # .asciiz
    return Data(tuple(_string(text)) + (0,))
