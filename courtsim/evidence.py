"""Evidence presented at a trial: audio recordings, documents and testimony."""

from __future__ import annotations

from abc import ABC, abstractmethod

from courtsim.person import Witness


class Evidence(ABC):
    """A named piece of evidence that starts out unvalidated."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.valid = False

    @abstractmethod
    def label(self) -> str:
        """Short label identifying the evidence."""

    @abstractmethod
    def description(self) -> str:
        """Human-readable description."""

    @abstractmethod
    def importance(self) -> int:
        """Weight of the evidence in the case."""

    @abstractmethod
    def validate(self) -> None:
        """Decide whether the evidence is valid."""

    def __str__(self) -> str:
        return self.description()


class AudioEvidence(Evidence):
    """An audio recording with a duration in seconds and a clarity out of 10."""

    def __init__(self, name: str, duration: int, clarity: int) -> None:
        super().__init__(name)
        self.duration = duration
        self.clarity = clarity

    def label(self) -> str:
        return self.name

    def description(self) -> str:
        valid = "Da" if self.valid else "Nu"
        return (f"Proba audio: {self.name} Durata: {self.duration} sec, "
                f"Claritate: {self.clarity}/10, Valida: {valid}")

    def importance(self) -> int:
        if self.clarity >= 8:
            score = 5
        elif self.clarity >= 5:
            score = 3
        else:
            score = 1
        if self.duration >= 60:
            score += 3
        elif self.duration >= 30:
            score += 2
        if self.valid:
            score += 2
        return score

    def validate(self) -> None:
        self.valid = self.clarity >= 5 and self.duration > 10


class DocumentEvidence(Evidence):
    """A written document of a given type."""

    def __init__(self, name: str, doc_type: str) -> None:
        super().__init__(name)
        self.doc_type = doc_type

    def label(self) -> str:
        return self.doc_type

    def description(self) -> str:
        return f"Document: {self.name} Tip: {self.doc_type}"

    def importance(self) -> int:
        if self.doc_type == "contract":
            score = 5
        elif self.doc_type == "factura":
            score = 3
        else:
            score = 1
        if len(self.name) > 10:
            score += 2
        if self.valid:
            score += 3
        return score

    def validate(self) -> None:
        self.valid = len(self.doc_type) > 3


class WitnessEvidence(Evidence):
    """Testimony of a witness, with credibility and relevance out of 10."""

    def __init__(self, name: str, credible: bool, relevance: int,
                 witness: Witness | None) -> None:
        super().__init__(name)
        self.credible = credible
        self.relevance = relevance
        self.witness = witness

    def label(self) -> str:
        return "martor"

    def description(self) -> str:
        credible = "Da" if self.credible else "Nu"
        valid = "Da" if self.valid else "Nu"
        return (f"Proba martor: {self.name}, Credibilitate: {credible}, "
                f"Relevanta declaratie: {self.relevance}/10, Valida: {valid}")

    def importance(self) -> int:
        score = 5 if self.credible else 0
        if self.relevance > 7:
            score += 4
        elif self.relevance > 4:
            score += 2
        else:
            score += 1
        if self.valid:
            score += 1
        return score

    def validate(self) -> None:
        self.valid = self.credible and self.relevance > 4