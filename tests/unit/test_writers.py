from sim6_asm.ast import Instruction, Data, Reg, LargeImm
from sim6_asm.isa import spec
from sim6_asm.regs import AX, BX, SP
from sim6_asm.writers import emit, to_hex_lines, write_object, write_hex, DATA_MARKER, CODE_MARKER

ADD = Instruction.new(spec("add"), Reg(AX), Reg(BX))
MOVI = Instruction.new(spec("movi"), Reg(SP), LargeImm(700))

def test_markers_and_order():
    image = emit([Data((1, 2)), Data((3,)), ADD, MOVI])
    assert image == b".data:" + b"\x01\x02\x03" + b".code:" + b"\x07\xc1" + b"\x53\x07\x02\xbc"

def test_code_marker_emitted_once():
    image = emit([ADD, ADD])
    assert image.count(CODE_MARKER) == 1
    assert image == DATA_MARKER + CODE_MARKER + b"\x07\xc1\x07\xc1"

def test_only_data_has_no_code_marker():
    assert emit([Data((0,))]) == DATA_MARKER + b"\x00"
    assert emit([]) == DATA_MARKER

def test_hex_listing_addresses():
    lines = to_hex_lines([Data((1,)), MOVI, ADD])
    assert lines == [
        "0x5800: 0x530702bc  movi sp, 700",
        "0x5804: 0x07c1  add ax, bx",
    ]

def test_write_files(tmp_path):
    out = tmp_path / "p.sse"
    write_object(emit([ADD]), str(out))
    assert out.read_bytes() == b".data:.code:\x07\xc1"
    lst = tmp_path / "p.hex"
    write_hex([ADD], str(lst), code_base=0)
    assert lst.read_text(encoding="utf-8") == "0x0000: 0x07c1  add ax, bx\n"
