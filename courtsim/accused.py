"""The accused party of a trial and its two kinds."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

from courtsim.person import Person, _prompt, _read_bool, _read_line


class Accused(Person, ABC):
    """A person facing an accusation."""

    def __init__(self, name: str, age: int, occupation: str, accusation: str,
                 guilty: bool, sentence: str = "Nedefinita") -> None:
        super().__init__(name, age, occupation)
        self.accusation = accusation
        self.guilty = guilty
        self.sentence = sentence

    def set_sentence(self, sentence: str) -> None:
        self.sentence = sentence

    @abstractmethod
    def react_to_sentence(self) -> str:
        """The accused's reaction to the sentence."""

    def receive_advice(self, advice: str) -> str:
        """Acknowledge a piece of advice."""
        return f"Acuzatul {self.name} primeste sfatul: {advice}"

    def _verdict_text(self) -> str:
        verdict = "Vinovat" if self.guilty else "Nevinovat"
        return f", Acuzatie: {self.accusation}, Vinovatie: {verdict}, Sentinta: {self.sentence}"

    def profile(self) -> str:
        return super().profile() + self._verdict_text()

    def update_from(self, reader: TextIO, out: TextIO | None = None) -> None:
        """Read the person fields, the accusation line and the guilt flag."""
        super().update_from(reader, out)
        _prompt(out, "Acuzatie: ")
        self.accusation = _read_line(reader)
        _prompt(out, "Este vinovat?")
        self.guilty = _read_bool(reader)

    def __str__(self) -> str:
        return self.name + self._verdict_text()


class Defendant(Accused):
    """Accused in a criminal trial."""

    def __init__(self, name: str, age: int, occupation: str, accusation: str,
                 guilty: bool) -> None:
        super().__init__(name, age, occupation, accusation, guilty)

    def react_to_sentence(self) -> str:
        return f"Inculpatul{self.name} primeste sentinta: {self.sentence}"


class Respondent(Accused):
    """Accused in a civil trial."""

    def __init__(self, name: str, age: int, occupation: str, accusation: str,
                 guilty: bool) -> None:
        super().__init__(name, age, occupation, accusation, guilty)

    def react_to_sentence(self) -> str:
        return f"Paratul{self.name} primeste sentinta: {self.sentence}"