from __future__ import annotations
import argparse, sys
from typing import List, Optional, Tuple

from .ast import Instruction, Node
from .diagnostics import AsmError, Diagnostic
from .linker import CODE_BASE, DATA_BASE, LinkResult, first_pass
from .parser import translate
from .writers import emit, write_hex, write_object

def assemble_text(
    text: str,
    *,
    filename: str | None = None,
    data_base: int = DATA_BASE,
    code_base: int = CODE_BASE,
) -> Tuple[List[Node], List[Diagnostic], Optional[LinkResult], Optional[bytes]]:
    """Hace PASADA 1, PASADA 2 y emite la imagen.
    Devuelve (nodes, diagnostics, link_result, image); ante el primer error,
    image es None y diagnostics contiene ese error."""
    lines = text.splitlines()
    diags: List[Diagnostic] = []
    link: Optional[LinkResult] = None
    try:
        link = first_pass(lines, data_base=data_base, code_base=code_base)
        diags.extend(link.diagnostics)
        nodes = translate(lines, link.symtab)
    except AsmError as ex:
        diags.append(ex.to_diagnostic(file=filename))
        return [], diags, link, None
    return nodes, diags, link, emit(nodes)

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Sim6 two-pass assembler")
    ap.add_argument("source", help="archivo .asm de entrada")
    ap.add_argument("output", help="archivo .sse de salida (imagen binaria)")
    ap.add_argument("--hex", dest="out_hex", help="listado opcional del código en hexadecimal")
    args = ap.parse_args(argv)

    if not args.source.endswith(".asm"):
        print(f"ERROR: el archivo de entrada debe terminar en .asm: {args.source}", file=sys.stderr)
        return 2
    if not args.output.endswith(".sse"):
        print(f"ERROR: el archivo de salida debe terminar en .sse: {args.output}", file=sys.stderr)
        return 2

    try:
        with open(args.source, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as ex:
        print(f"ERROR: no pude leer {args.source}: {ex}", file=sys.stderr)
        return 2

    nodes, diags, link, image = assemble_text(text, filename=args.source)

    for d in diags:
        print(d, file=sys.stderr)
    if image is None:
        return 1

    try:
        write_object(image, args.output)
        if args.out_hex:
            write_hex(nodes, args.out_hex, code_base=link.code_base)
    except OSError as ex:
        print(f"ERROR al escribir salidas: {ex}", file=sys.stderr)
        return 3

    n_ins = sum(1 for n in nodes if isinstance(n, Instruction))
    print(f"OK: {n_ins} instrucciones, {link.data_size} bytes de datos → {args.output}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
