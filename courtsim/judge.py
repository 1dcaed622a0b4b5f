"""Judges and their styles."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TextIO

from courtsim.person import Person, _prompt, _read_int


class Specialization(Enum):
    CIVIL = 0
    PENAL = 1

    def __str__(self) -> str:
        return self.name.capitalize()


class Judge(Person, ABC):
    """A judge with years of experience and a specialization."""

    def __init__(self, name: str = "", age: int = 0, experience: int = 0,
                 specialization: Specialization = Specialization.CIVIL) -> None:
        super().__init__(name, age, "Judecator")
        self.experience = experience
        self.specialization = specialization

    def profile(self) -> str:
        return (f"{super().profile()} Ani experienta: {self.experience}"
                f" Specializare: {self.specialization}")

    @abstractmethod
    def style(self) -> str:
        """Name of the judge's style."""

    @abstractmethod
    def analyze_evidence(self) -> str:
        """How the judge examines evidence."""

    @abstractmethod
    def hear_witnesses(self) -> str:
        """How the judge hears witnesses."""

    def update_from(self, reader: TextIO, out: TextIO | None = None) -> None:
        """Read person fields, experience and specialization (invalid -> civil)."""
        super().update_from(reader, out)
        _prompt(out, "Introdu Ani Experienta: ")
        self.experience = _read_int(reader)
        _prompt(out, "Introdu Specializare:(0-Civil, 1-Penal, introdu numarul) ")
        value = _read_int(reader)
        self.specialization = Specialization(value if value in (0, 1) else 0)

    def __str__(self) -> str:
        return (f"{super().__str__()} Ani Experienta: {self.experience}"
                f" Specializare: {self.specialization}")


class StrictJudge(Judge):
    def style(self) -> str:
        return "Sever"

    def analyze_evidence(self) -> str:
        return "Judecatorul sever analizeaza probele cu mare atentie si strictete."

    def hear_witnesses(self) -> str:
        return "Judecatorul sever audiaza martorul agresiv,autoritar."


class EmpatheticJudge(Judge):
    def style(self) -> str:
        return "Empatic"

    def analyze_evidence(self) -> str:
        return "Judecatorul empatic analizeaza probele cu mare atentie,dar cauta cauze atenunate."

    def hear_witnesses(self) -> str:
        return "Judecatorul sever audiaza martorul empatic,intelegator."


class BalancedJudge(Judge):
    def style(self) -> str:
        return "Echilibrat"

    def analyze_evidence(self) -> str:
        return "Judecatorul echilibrat analizeaza probele cu mare atentie,e impartial."

    def hear_witnesses(self) -> str:
        return "Judecatorul sever audiaza martorul neutru."