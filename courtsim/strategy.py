"""Defence strategies: advice for the accused and scoring of possible actions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection, MutableMapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from courtsim.trial import Trial, TrialType

if TYPE_CHECKING:
    from courtsim.accused import Accused
    from courtsim.evidence import Evidence
    from courtsim.judge import Judge

ADMIT = "Recunoaste partial si justifica contextul"
PLEAD_INNOCENT = "Pledeaza nevinovat"
CONTEST_EVIDENCE = "Contesta validitatea probelor"
CONTEST_WITNESSES = "Contesta validitatea martorilor"
AGE_AND_RECORD = "Vorbeste despre varsta si lipsa antecedentelor"
NO_DISCERNMENT = "Vorbeste despre lipsa de discernamant"
MANIPULATE = "Incearca sa manipulezi judecatorul"
EMPATHIZE = "Incearca sa empatizezi cu judecatorul fiind cooperant si sincer"
CALL_WITNESS = "Cheama un martor din partea ta"


def _bump(actions: MutableMapping[str, int], action: str, delta: int) -> None:
    actions[action] = actions.get(action, 0) + delta


def _is_strong_witness(item: Evidence) -> bool:
    return item.label() == "martor" and item.importance() > 5 and item.valid


@dataclass(frozen=True)
class _Weights:
    innocent: tuple[tuple[str, int], ...]
    guilty: tuple[tuple[str, int], ...]
    weak_witness: int
    strong_evidence_contest: int
    age_bonus: int
    minor_bonus: int
    naive_judge_manipulate: int
    judge_manipulate: int
    civil_admit: int


class Strategy(ABC):
    """A way for a lawyer to conduct the defence."""

    _available_actions: ClassVar[dict[str, int]] = {
        ADMIT: 0,
        PLEAD_INNOCENT: 0,
        CONTEST_EVIDENCE: 0,
        CONTEST_WITNESSES: 0,
        AGE_AND_RECORD: 0,
        NO_DISCERNMENT: 0,
        MANIPULATE: 0,
        EMPATHIZE: 0,
        CALL_WITNESS: 0,
    }
    _weights: ClassVar[_Weights]

    @classmethod
    def list_actions(cls) -> str:
        """Numbered menu of the available actions, in sorted order."""
        lines = ["Ce vrei sa faci:"]
        lines.extend(f"{number}. {action}"
                     for number, action in enumerate(sorted(cls._available_actions), 1))
        return "\n".join(lines) + "\n"

    @abstractmethod
    def advise(self, accused: Accused, evidence: Collection[Evidence],
               judge: Judge, trial: Trial) -> str:
        """Advice text for the accused."""

    def score_actions(self, actions: MutableMapping[str, int], accused: Accused,
                      evidence: Collection[Evidence], judge: Judge, trial: Trial) -> None:
        """Adjust the scores in ``actions`` in place; missing actions start at 0."""
        weights = self._weights
        for action, delta in (weights.guilty if accused.guilty else weights.innocent):
            _bump(actions, action, delta)

        for item in evidence:
            if _is_strong_witness(item):
                _bump(actions, CALL_WITNESS, 2)
                _bump(actions, EMPATHIZE, 1)
            else:
                _bump(actions, CALL_WITNESS, weights.weak_witness)
            if item.importance() > 5 and item.valid:
                _bump(actions, CONTEST_EVIDENCE, weights.strong_evidence_contest)
            else:
                _bump(actions, CONTEST_EVIDENCE, 2)

        if accused.age < 25 or accused.age > 60:
            _bump(actions, AGE_AND_RECORD, weights.age_bonus)
        else:
            _bump(actions, AGE_AND_RECORD, -2)

        _bump(actions, NO_DISCERNMENT, weights.minor_bonus if accused.age < 18 else -2)

        style = judge.style()
        if style == "Empatic":
            _bump(actions, EMPATHIZE, 3)
        elif style == "Echilibrat":
            _bump(actions, EMPATHIZE, 2)

        if judge.age < 5:
            _bump(actions, MANIPULATE, weights.naive_judge_manipulate)
        else:
            _bump(actions, MANIPULATE, weights.judge_manipulate)

        if trial.kind is TrialType.CIVIL:
            _bump(actions, ADMIT, weights.civil_admit)
            _bump(actions, EMPATHIZE, 1)

    def apply_action(self, option: str) -> None:
        """Add the chosen action's value to the shared trial score."""
        Trial.add_score(self._available_actions.get(option, 0))


class AggressiveStrategy(Strategy):
    """Deny, attack every piece of evidence and press on the lack of proof."""

    _weights = _Weights(
        innocent=((PLEAD_INNOCENT, 2), (EMPATHIZE, 3), (ADMIT, -2)),
        guilty=((ADMIT, 2), (PLEAD_INNOCENT, -2), (EMPATHIZE, -2)),
        weak_witness=-2,
        strong_evidence_contest=-2,
        age_bonus=2,
        minor_bonus=2,
        naive_judge_manipulate=2,
        judge_manipulate=-3,
        civil_admit=1,
    )

    def advise(self, accused: Accused, evidence: Collection[Evidence],
               judge: Judge, trial: Trial) -> str:
        parts = ["Strategie Agresiva:\n"]
        if accused.guilty:
            parts.append("- Recomanda recunoașterea partiala și justificarea contextului.\n")
        else:
            parts.append("- Neaga orice acuzație și ataca argumentele acuzatorului direct.\n")
        if accused.age < 30 and not accused.guilty:
            parts.append("-Scoate in evidenta tineretea si lipsa antecedentelor. \n")
        if len(evidence) > 2:
            parts.append("- Adu în discuție fiecare proba, inclusiv pe cele mai slabe, "
                         "pentru a destabiliza cazul acuzării.\n")
        for item in evidence:
            if not item.valid:
                parts.append(f"- Contestă validitatea probei \"{item.description()}\".\n")
            elif item.importance() > 7:
                parts.append(f"- Contraargumentează proba importantă: \"{item.description()}\".\n")
        if judge.style() == "Sever":
            parts.append("- Atenție: stilul sever al judecătorului impune o abordare atentă.\n")
        if trial.kind is TrialType.PENAL:
            parts.append("- Insistă pe lipsa de dovezi clare și pe nevinovăția prezumată.\n")
        return "".join(parts)


class EmotionalStrategy(Strategy):
    """Appeal to empathy, character and human circumstances."""

    _weights = _Weights(
        innocent=((PLEAD_INNOCENT, 1), (EMPATHIZE, 1), (ADMIT, -3)),
        guilty=((ADMIT, 1), (PLEAD_INNOCENT, -2), (EMPATHIZE, -3)),
        weak_witness=-3,
        strong_evidence_contest=-3,
        age_bonus=1,
        minor_bonus=3,
        naive_judge_manipulate=3,
        judge_manipulate=-2,
        civil_admit=2,
    )

    def advise(self, accused: Accused, evidence: Collection[Evidence],
               judge: Judge, trial: Trial) -> str:
        parts = ["Strategie emotionanta:"]
        if not accused.guilty:
            parts.append("- Evidențiază nevinovăția acuzatului prin apel emoțional.\n")
        if any(_is_strong_witness(item) for item in evidence):
            parts.append("- Folosește martorii pentru a susține caracterul și "
                         "circumstanțele umane.\n")
        if accused.age < 25 or accused.age > 60:
            parts.append("- Argumentează tinerețea sau vârsta înaintată pentru a genera "
                         "empatie.\n ")
        style = judge.style()
        if style == "Empatic":
            parts.append("- Mizează pe empatia judecătorului cu povești personale.\n")
        if trial.kind is TrialType.CIVIL:
            parts.append("- Fiind un proces civil, poți apela la convingerea morală mai mult "
                         "decât la fapte rigide.\n")
        if style == "Echilibrat":
            parts.append("- Mizează pe cooperare și sinceritate.\n")
        return "".join(parts)


class BalancedStrategy(Strategy):
    """Rely on the strongest evidence and on plain logic."""

    _weights = _Weights(
        innocent=((PLEAD_INNOCENT, 2), (EMPATHIZE, 1), (ADMIT, -3)),
        guilty=((ADMIT, 1), (PLEAD_INNOCENT, -2), (EMPATHIZE, -2)),
        weak_witness=-2,
        strong_evidence_contest=-2,
        age_bonus=2,
        minor_bonus=2,
        naive_judge_manipulate=2,
        judge_manipulate=-3,
        civil_admit=1,
    )

    def advise(self, accused: Accused, evidence: Collection[Evidence],
               judge: Judge, trial: Trial) -> str:
        parts = ["Strategie echilibrata:\n"]
        if accused.guilty:
            parts.append("- Incearca sa obtii circumstante atenunate si recunoaste partial "
                         "faptele")
        strong = sum(1 for item in evidence if item.importance() > 7)
        if strong >= 2:
            parts.append("- Concentrează apărarea doar pe cele mai convingătoare probe.\n")
        else:
            parts.append("- Nu sunt probe convingătoare, recomandă negocierea sau retragerea "
                         "acuzării.\n")
        if judge.experience > 15:
            parts.append("- Judecătorul are experiență mare: evită manipulările, bazează-te "
                         "pe logică simplă.\n")
        if trial.kind is TrialType.PENAL:
            parts.append("- În penal trebuie siguranță, evită să aduci martori slabi sau "
                         "probe îndoielnice.\n")
        return "".join(parts)