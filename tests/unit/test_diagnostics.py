from sim6_asm.diagnostics import error, warning, UnknownLabel, AsmError

def test_error_str():
    d = error("inmediato fuera de rango", line=12, file="prog.asm", hint="use 5 bits")
    s = str(d)
    assert "prog.asm:12:" in s
    assert "ERROR: inmediato fuera de rango" in s
    assert "(pista: use 5 bits)" in s

def test_warning_without_location():
    assert str(warning("etiqueta redefinida")) == "ADVERTENCIA: etiqueta redefinida"

def test_asm_error_location_and_diagnostic():
    ex = UnknownLabel("Etiqueta no definida: foo")
    assert isinstance(ex, AsmError) and isinstance(ex, ValueError)
    ex.at(7, "movi ax @foo")
    ex.at(99, "otra línea")   # la primera ubicación se conserva
    d = ex.to_diagnostic(file="p.asm")
    assert d.severity == "error" and d.line == 7
    assert str(d).startswith("p.asm:7: ERROR: [UnknownLabel] Etiqueta no definida: foo")
    assert "movi ax @foo" in d.message
