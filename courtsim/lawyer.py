"""The defence lawyer, who advises clients through a chosen strategy."""

from __future__ import annotations

from collections.abc import Collection, MutableMapping
from typing import TYPE_CHECKING

from courtsim.collection import ElementList
from courtsim.person import Person

if TYPE_CHECKING:
    from courtsim.accused import Accused
    from courtsim.evidence import Evidence
    from courtsim.judge import Judge
    from courtsim.strategy import Strategy
    from courtsim.trial import Trial

UNDECIDED_ADVICE = "Inca ma gandesc"


class Lawyer(Person):
    """A lawyer with clients, a record of won cases and an optional strategy."""

    def __init__(self, name: str, age: int) -> None:
        super().__init__(name, age, "Avocat")
        self.clients: ElementList[Accused] = ElementList()
        self.cases_won = 0
        self.strategy: Strategy | None = None

    def set_strategy(self, strategy: Strategy | None) -> None:
        self.strategy = strategy

    def add_client(self, accused: Accused) -> None:
        self.clients.add(accused)

    def win_case(self) -> None:
        self.cases_won += 1

    def advise(self, accused: Accused, evidence: Collection[Evidence],
               judge: Judge, trial: Trial) -> str:
        """Advice from the current strategy, or a holding answer without one."""
        if self.strategy is None:
            return UNDECIDED_ADVICE
        return self.strategy.advise(accused, evidence, judge, trial)

    def score_actions(self, actions: MutableMapping[str, int], accused: Accused,
                      evidence: Collection[Evidence], judge: Judge, trial: Trial) -> None:
        """Let the current strategy adjust ``actions``; without one nothing changes."""
        if self.strategy is not None:
            self.strategy.score_actions(actions, accused, evidence, judge, trial)

    def apply_action(self, action: str) -> None:
        """Apply the chosen action through the current strategy, if any."""
        if self.strategy is not None:
            self.strategy.apply_action(action)

    def profile(self) -> str:
        clients = "".join(f" - {client.name}" for client in self.clients)
        return f"{super().profile()}Cazuri castigate: {self.cases_won} Clienti: {clients}"