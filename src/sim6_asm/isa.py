'''
tabla formal Sim6 (mnemónicos, códigos de 6 bits, forma de operandos, flags)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict

from .diagnostics import UnknownOpcode

# Formas de operandos
NO_OPERAND    = "NN"   # nop
ONE_REGISTER  = "RN"   # inc ax
TWO_REGISTER  = "RR"   # add ax, bx
REG_SHORT_IMM = "RI"   # in ax, 5     (inmediato de 5 bits)
REG_LARGE_IMM = "RL"   # movi ax, 700 (inmediato de 16 bits)

SHAPES = (NO_OPERAND, ONE_REGISTER, TWO_REGISTER, REG_SHORT_IMM, REG_LARGE_IMM)

INSTR_SIZE = 2
LONG_INSTR_SIZE = 4   # palabra Long: inmediato de 16 bits en la mitad baja

@dataclass(frozen=True)
class OpSpec:
    """Especificación de un opcode Sim6.

    - code: campo de 6 bits
    - shape: 'NN','RN','RR','RI','RL'
    - signed / set_flags: propiedades intrínsecas del opcode, no de los operandos
    """
    name: str
    code: int
    shape: str
    signed: bool = False
    set_flags: bool = False

    @property
    def size(self) -> int:
        """Bytes que ocupa la instrucción codificada."""
        return LONG_INSTR_SIZE if self.shape == REG_LARGE_IMM else INSTR_SIZE

    def __str__(self) -> str:
        return self.name

SPEC: Dict[str, OpSpec] = {}

def _add(name: str, code: int, shape: str, *, signed: bool = False, set_flags: bool = False):
    SPEC[name] = OpSpec(name, code, shape, signed=signed, set_flags=set_flags)

# Aritmética
_add("nop",   0,  NO_OPERAND)
_add("add",   1,  TWO_REGISTER, signed=True, set_flags=True)
_add("addc",  2,  ONE_REGISTER, signed=True, set_flags=True)
_add("inc",   3,  ONE_REGISTER, signed=True, set_flags=True)
_add("sub",   4,  TWO_REGISTER, signed=True, set_flags=True)
_add("subb",  5,  ONE_REGISTER, signed=True, set_flags=True)
_add("dec",   6,  ONE_REGISTER, signed=True, set_flags=True)
_add("cmp",   7,  TWO_REGISTER, signed=True, set_flags=True)
_add("neg",   8,  ONE_REGISTER, signed=True, set_flags=True)

# Movimiento y pila
_add("move",  9,  TWO_REGISTER)
_add("push",  10, ONE_REGISTER)
_add("pop",   11, ONE_REGISTER)
_add("pusha", 12, NO_OPERAND)
_add("popa",  13, NO_OPERAND)
_add("pushf", 14, NO_OPERAND)
_add("popf",  15, NO_OPERAND, set_flags=True)
_add("swap",  16, TWO_REGISTER)

# Puertos y carga de direcciones/constantes
_add("in",    17, REG_SHORT_IMM)
_add("out",   18, REG_SHORT_IMM)
_add("lda",   19, TWO_REGISTER)
_add("movi",  20, REG_LARGE_IMM)

# Multiplicación / división
_add("mul",   21, TWO_REGISTER, signed=True, set_flags=True)
_add("mulu",  22, TWO_REGISTER, set_flags=True)
_add("div",   23, TWO_REGISTER, signed=True, set_flags=True)
_add("divu",  24, TWO_REGISTER, set_flags=True)
_add("csign", 25, ONE_REGISTER, signed=True)

# Lógica y desplazamientos
_add("not",   26, ONE_REGISTER, set_flags=True)
_add("and",   27, TWO_REGISTER, set_flags=True)
_add("or",    28, TWO_REGISTER, set_flags=True)
_add("xor",   29, TWO_REGISTER, set_flags=True)
_add("sra",   30, TWO_REGISTER, signed=True, set_flags=True)
_add("srl",   31, TWO_REGISTER, set_flags=True)
_add("sll",   32, TWO_REGISTER, set_flags=True)
_add("clear", 33, ONE_REGISTER)

# Control de flujo (dirección destino en el registro)
_add("call",  34, ONE_REGISTER)
_add("ret",   35, NO_OPERAND)
_add("jump",  36, ONE_REGISTER)
_add("jeq",   37, ONE_REGISTER)
_add("jne",   38, ONE_REGISTER)
_add("jgt",   39, ONE_REGISTER, signed=True)
_add("jle",   40, ONE_REGISTER, signed=True)
_add("jgte",  41, ONE_REGISTER, signed=True)
_add("jlte",  42, ONE_REGISTER, signed=True)
_add("jzro",  43, ONE_REGISTER)
_add("jnzro", 44, ONE_REGISTER)
_add("jovf",  45, ONE_REGISTER)
_add("jcry",  46, ONE_REGISTER)

# Flags e interrupciones
_add("scry",  47, NO_OPERAND, set_flags=True)
_add("ccry",  48, NO_OPERAND, set_flags=True)
_add("eitr",  49, NO_OPERAND)
_add("ditr",  50, NO_OPERAND)
_add("intr",  51, REG_SHORT_IMM)
_add("into",  52, REG_SHORT_IMM)
_add("iret",  53, NO_OPERAND, set_flags=True)

# Memoria
_add("load",  54, TWO_REGISTER)
_add("store", 55, TWO_REGISTER)

# Variantes sin signo
_add("addu",  56, TWO_REGISTER, set_flags=True)
_add("subu",  57, TWO_REGISTER, set_flags=True)

def spec(mnemonic: str) -> OpSpec:
    """Devuelve la especificación de un opcode por mnemónico (sin distinguir mayúsculas)."""
    m = mnemonic.lower()
    if m not in SPEC:
        raise UnknownOpcode(f"Instrucción desconocida: {mnemonic}")
    return SPEC[m]
