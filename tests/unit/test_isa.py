import pytest
from sim6_asm.isa import spec, SPEC, SHAPES, NO_OPERAND, TWO_REGISTER, REG_LARGE_IMM, REG_SHORT_IMM
from sim6_asm.diagnostics import UnknownOpcode

def test_core_opcodes_present():
    assert spec("nop").code == 0
    assert spec("add").code == 1
    assert spec("movi").code == 20
    assert spec("MOVI").shape == REG_LARGE_IMM
    assert spec("In").shape == REG_SHORT_IMM
    assert spec("store").code == 55
    assert spec("subu").code == 57

def test_codes_are_unique_and_fit_6_bits():
    codes = [s.code for s in SPEC.values()]
    assert len(codes) == len(set(codes))
    assert all(0 <= c < 64 for c in codes)
    assert all(s.shape in SHAPES for s in SPEC.values())

def test_intrinsic_flags():
    assert spec("add").signed and spec("add").set_flags
    assert not spec("addu").signed and spec("addu").set_flags
    assert not spec("movi").signed and not spec("movi").set_flags
    assert spec("nop").shape == NO_OPERAND and not spec("nop").set_flags
    assert spec("load").shape == TWO_REGISTER

@pytest.mark.parametrize("mn", ["imul", "mov", "", "nopx", "add,"])
def test_unknown(mn):
    with pytest.raises(UnknownOpcode):
        spec(mn)
