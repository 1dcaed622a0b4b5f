import io

import pytest

from courtsim.accused import Accused, Defendant, Respondent


def test_accused_is_abstract():
    with pytest.raises(TypeError):
        Accused("Ion", 30, "Sofer", "furt", True)


def test_default_sentence():
    d = Defendant("Ion", 30, "Sofer", "furt", True)
    assert d.sentence == "Nedefinita"


def test_str_format():
    d = Defendant("Ion", 30, "Sofer", "furt", True)
    assert str(d) == "Ion, Acuzatie: furt, Vinovatie: Vinovat, Sentinta: Nedefinita"


def test_str_not_guilty():
    r = Respondent("Ion", 30, "Sofer", "datorie", False)
    assert "Vinovatie: Nevinovat" in str(r)


def test_profile_extends_person_profile():
    d = Defendant("Ion", 30, "Sofer", "furt", False)
    assert d.profile().startswith("Nume: IonVarsta: 30, Acuzatie: furt")


def test_defendant_reaction():
    d = Defendant("Ion", 30, "Sofer", "furt", True)
    d.set_sentence("5 ani")
    assert d.react_to_sentence() == "InculpatulIon primeste sentinta: 5 ani"


def test_respondent_reaction():
    r = Respondent("Ana", 40, "Medic", "datorie", False)
    r.set_sentence("amenda")
    assert r.react_to_sentence() == "ParatulAna primeste sentinta: amenda"


def test_receive_advice():
    d = Defendant("Ion", 30, "Sofer", "furt", True)
    assert d.receive_advice("taci") == "Acuzatul Ion primeste sfatul: taci"


def test_update_from():
    d = Defendant("x", 0, "x", "x", False)
    out = io.StringIO()
    d.update_from(io.StringIO("Vasile 22 Student\nfurt calificat\n1\n"), out)
    assert (d.name, d.age, d.occupation) == ("Vasile", 22, "Student")
    assert d.accusation == "furt calificat"
    assert d.guilty is True
    assert "Este vinovat?" in out.getvalue()


def test_update_from_bad_flag():
    d = Defendant("x", 0, "x", "x", False)
    with pytest.raises(ValueError):
        d.update_from(io.StringIO("V 22 S\nfurt\nda\n"), io.StringIO())