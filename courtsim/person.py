"""People taking part in a trial: the base person, plaintiffs and witnesses."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO


def _read_token(reader: TextIO) -> str:
    """Read one whitespace-delimited word, consuming the character that ends it."""
    char = reader.read(1)
    while char and char.isspace():
        char = reader.read(1)
    if not char:
        raise EOFError("unexpected end of input")
    chars = []
    while char and not char.isspace():
        chars.append(char)
        char = reader.read(1)
    return "".join(chars)


def _read_int(reader: TextIO) -> int:
    token = _read_token(reader)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


def _read_bool(reader: TextIO) -> bool:
    token = _read_token(reader)
    if token not in ("0", "1"):
        raise ValueError(f"expected 0 or 1, got {token!r}")
    return token == "1"


def _read_line(reader: TextIO) -> str:
    line = reader.readline()
    if not line:
        raise EOFError("unexpected end of input")
    return line.rstrip("\n")


def _prompt(out: TextIO | None, text: str) -> None:
    (out or sys.stdout).write(text)


class Person:
    """A named person with an age and an occupation."""

    def __init__(self, name: str = "Necunoscut", age: int = 0,
                 occupation: str = "Necunoscuta") -> None:
        self.name = name
        self.age = age
        self.occupation = occupation

    def profile(self) -> str:
        """Short profile line."""
        return f"Nume: {self.name}Varsta: {self.age}"

    def update_from(self, reader: TextIO, out: TextIO | None = None) -> None:
        """Read name, age and occupation from ``reader``, prompting on ``out``."""
        _prompt(out, "Introdu nume: ")
        self.name = _read_token(reader)
        _prompt(out, "Introdu varsta: ")
        self.age = _read_int(reader)
        _prompt(out, "Introdu ocupatie: ")
        self.occupation = _read_token(reader)

    def __str__(self) -> str:
        return f"Nume: {self.name}, Varsta: {self.age}, Ocupatie: {self.occupation}"


class Plaintiff(Person):
    """The party bringing a complaint."""

    def __init__(self, name: str, age: int, occupation: str, reason: str) -> None:
        super().__init__(name, age, occupation)
        self.reason = reason

    def update_from(self, reader: TextIO, out: TextIO | None = None) -> None:
        """Read the reason of the complaint as a whole line."""
        _prompt(out, "Introdu motivul reclamatiei: ")
        self.reason = _read_line(reader)

    def __str__(self) -> str:
        return f"{super().__str__()} | Motiv: {self.reason}"


class Side(Enum):
    """The party a witness supports."""

    ACCUSED = 0
    PLAINTIFF = 1

    def __str__(self) -> str:
        return "acuzat" if self is Side.ACCUSED else "reclamant"


class Witness(Person):
    """A witness giving a statement for one of the parties."""

    def __init__(self, name: str, age: int, occupation: str, statement: str,
                 credible: bool, side: Side) -> None:
        super().__init__(name, age, occupation)
        self.statement = statement
        self.credible = credible
        self.side = side

    def update_from(self, reader: TextIO, out: TextIO | None = None) -> None:
        """Read the person fields, the statement, credibility and side."""
        super().update_from(reader, out)
        _prompt(out, "Introdu declaratia: ")
        self.statement = _read_line(reader)
        _prompt(out, "Introdu credibilitatea(0,1): ")
        self.credible = _read_bool(reader)
        _prompt(out, "Introdu parte(0 = Acuzat, 1 = Reclamant)")
        self.side = Side.ACCUSED if _read_int(reader) == 0 else Side.PLAINTIFF

    def __str__(self) -> str:
        return f"{super().__str__()} | Declaratie: {self.statement}sustine: {self.side}"