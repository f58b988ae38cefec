import pytest
from sim6_asm.parser import parse_instruction, process_line, translate
from sim6_asm.ast import Instruction, Data, Reg, ShortImm, LargeImm, NO_REG
from sim6_asm.isa import spec
from sim6_asm.regs import AX, BX, DL, SP, NONE
from sim6_asm.diagnostics import (
    ImmediateOutOfRange, ImmediateTooLarge, InvalidLabel, InvalidOperandShape,
    InvalidRegisterCode, InvalidRegisterOperand, UnknownDirective, UnknownLabel,
    UnknownOpcode, UnknownRegister,
)

def _code(line, symtab=None):
    node, mode = process_line(line, symtab or {}, data_mode=False)
    assert mode is False
    return node

@pytest.mark.parametrize("src, expected", [
    ("Nop", Instruction.new(spec("nop"), Reg(NONE), Reg(NONE))),
    ("ADD ax, bx", Instruction.new(spec("add"), Reg(AX), Reg(BX))),
    ("ADDC ax", Instruction.new(spec("addc"), Reg(AX), NO_REG)),
    ("in dl, 5", Instruction.new(spec("in"), Reg(DL), ShortImm(5))),
    ("movi sp, 700", Instruction.new(spec("movi"), Reg(SP), LargeImm(700))),
    ("mOvi ax   0xFFFF", Instruction.new(spec("movi"), Reg(AX), LargeImm(0xFFFF))),
    ("out ax 0b11001", Instruction.new(spec("out"), Reg(AX), ShortImm(25))),
])
def test_parse_instruction(src, expected):
    assert parse_instruction(src) == expected

@pytest.mark.parametrize("src", [
    "  NOP", "my_label: POPA", "pusha", "ret", "scry", "CcRy",
    "__hello:      Eitr    ", "Ditr", "Iret",
    "ADDC  ax", "inc bl", "Subb bh", "Dec    dx", "label:  Neg DX",
    "_l_a_b_e_l: Push  aH", "Pop Ah", "Csign        ah", "CLEAR rp",
    "  in rp, 10", "out ax 10", "InTr rp, 0", "lbl: Into, sp,,, 0",
    "mOvi ax   700", "mOvi ax   0",
    "ADD ax bx", "sub ax bx", "ADDu ax bx", "subu ax bx", "move ah bh",
    "And al bl", "SRa al bl", "Load ax bx", "Store ax bx", "Mul ax bx",
    "mulu ax bx", "div ax, bx", "divu ax, bx", "move al, ah",
])
def test_valid_code_lines(src):
    assert isinstance(_code(src), Instruction)

@pytest.mark.parametrize("src, exc", [
    ("nop ax", InvalidRegisterCode),
    ("add ax", InvalidRegisterCode),
    ("add ax 10", InvalidOperandShape),
    ("addc ax sp", InvalidRegisterOperand),
    ("addc 5", UnknownRegister),
    ("out ax", InvalidOperandShape),
    ("in ax sp", InvalidOperandShape),
    ("movi ax sp", InvalidOperandShape),
    ("add ah, bl", InvalidRegisterCode),
    ("add ax, bl", InvalidRegisterCode),
    ("in ax 32", ImmediateTooLarge),
    ("in ax 256", ImmediateOutOfRange),
    ("movi ax 65536", ImmediateOutOfRange),
    ("mov ax, bx", UnknownOpcode),
    ("add ax, bx, cx", InvalidOperandShape),
    ("push st", UnknownRegister),
    ("jump pc", InvalidRegisterOperand),
    ("1abc: nop", InvalidLabel),
])
def test_invalid_code_lines(src, exc):
    with pytest.raises(exc):
        _code(src)

def test_label_only_and_markers():
    assert process_line("loop:", {}, data_mode=False) == (None, False)
    assert process_line("loop:", {}, data_mode=True) == (None, True)
    assert process_line(".code", {}, data_mode=True) == (None, False)
    assert process_line(".data:", {}, data_mode=True) == (None, True)
    with pytest.raises(UnknownDirective):
        process_line(".data", {}, data_mode=False)

def test_label_reference_substitution():
    node = _code("movi ax @msg", {"msg": 0x9000})
    assert node.b == LargeImm(0x9000)
    node, _ = process_line("ptr: .word @msg", {"msg": 0x9000}, data_mode=True)
    assert node == Data((0x90, 0x00))

def test_undefined_label():
    with pytest.raises(UnknownLabel):
        _code("movi ax @undefined_label")

def test_data_mode_rejects_instructions():
    with pytest.raises(UnknownDirective):
        process_line("add ax, bx", {}, data_mode=True)

def test_translate_flips_mode_and_reports_line():
    lines = [
        "msg: .asciiz `Hi`",
        "",
        ".code",
        "main:",
        "  movi ax @msg",
        "  add ax, bx",
    ]
    nodes = translate(lines, {"msg": 0x9000, "main": 0x5800})
    assert nodes[0] == Data((0x48, 0x69, 0x00))
    assert [n.opcode.name for n in nodes[1:]] == ["movi", "add"]

    with pytest.raises(UnknownOpcode) as ei:
        translate([".code", "nop", "bogus ax"], {})
    assert ei.value.line == 3
    assert ei.value.source == "bogus ax"

@pytest.mark.parametrize("src", ["in ax ٣", "out ax, ٣٢"])
def test_non_ascii_digits_are_not_immediates(src):
    with pytest.raises(UnknownRegister):
        _code(src)
