import io

import pytest

from courtsim.person import Person, Plaintiff, Side, Witness


def test_default_person():
    p = Person()
    assert (p.name, p.age, p.occupation) == ("Necunoscut", 0, "Necunoscuta")


def test_person_str():
    assert str(Person("Ana", 30, "Medic")) == "Nume: Ana, Varsta: 30, Ocupatie: Medic"


def test_person_profile():
    assert Person("Ana", 30, "Medic").profile() == "Nume: AnaVarsta: 30"


def test_person_update_from():
    p = Person()
    out = io.StringIO()
    p.update_from(io.StringIO("Ion\n42\nInginer\n"), out)
    assert (p.name, p.age, p.occupation) == ("Ion", 42, "Inginer")
    assert "Introdu nume: " in out.getvalue()
    assert "Introdu ocupatie: " in out.getvalue()


def test_person_update_invalid_age():
    with pytest.raises(ValueError):
        Person().update_from(io.StringIO("Ion abc Inginer\n"), io.StringIO())


def test_person_update_eof():
    with pytest.raises(EOFError):
        Person().update_from(io.StringIO("Ion 42"), io.StringIO())


def test_plaintiff_str():
    r = Plaintiff("Ana", 30, "Medic", "Datorie")
    assert str(r) == str(Person("Ana", 30, "Medic")) + " | Motiv: Datorie"


def test_plaintiff_update_reads_line():
    r = Plaintiff("Ana", 30, "Medic", "x")
    r.update_from(io.StringIO("Nu mi-a platit chiria\n"), io.StringIO())
    assert r.reason == "Nu mi-a platit chiria"
    assert r.name == "Ana"


def test_witness_str():
    w = Witness("Ana", 30, "Medic", "Am vazut", True, Side.ACCUSED)
    assert str(w).endswith(" | Declaratie: Am vazutsustine: acuzat")
    w.side = Side.PLAINTIFF
    assert str(w).endswith("sustine: reclamant")


def test_witness_update_from():
    w = Witness("x", 0, "x", "x", False, Side.ACCUSED)
    w.update_from(io.StringIO("Maria 50 Profesor\nAm vazut totul\n1\n1\n"), io.StringIO())
    assert w.name == "Maria"
    assert w.age == 50
    assert w.statement == "Am vazut totul"
    assert w.credible is True
    assert w.side is Side.PLAINTIFF


@pytest.mark.parametrize("value, side", [("0", Side.ACCUSED), ("7", Side.PLAINTIFF)])
def test_witness_side_choice(value, side):
    w = Witness("x", 0, "x", "x", True, Side.PLAINTIFF)
    w.update_from(io.StringIO(f"M 5 P\nText\n0\n{value}\n"), io.StringIO())
    assert w.side is side
    assert w.credible is False


def test_witness_bad_credibility():
    w = Witness("x", 0, "x", "x", True, Side.ACCUSED)
    with pytest.raises(ValueError):
        w.update_from(io.StringIO("M 5 P\nText\n2\n0\n"), io.StringIO())