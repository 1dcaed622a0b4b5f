# courtsim

A small courtroom model. It describes the people in a trial (accused
parties, plaintiffs, witnesses, judges and lawyers) and the evidence brought
before the court. It also provides the strategies a lawyer can follow to
advise a client and to score the courses of action open to them.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
courtsim
```

The command prints `Hello, world!`. It then asks how many integers to read,
reads them one at a time from standard input and lists them back. It reads at
most 100 values. If the input is not an integer, if the count is too large, or
if the input ends too early, it writes a message to standard error and exits
with status 1.

## Library overview

- `courtsim.person`
  - `Person` has a name, an age and an occupation.
  - `Plaintiff` adds the reason for the complaint.
  - `Witness` adds a statement, a credibility flag and the `Side` it supports.
  - Every person has a `profile()` string and a `str()` form.
  - `update_from(reader, out)` reads a person's fields from a text stream and
    writes its prompts to `out`, or to standard output when `out` is not given.
- `courtsim.accused`
  - `Accused` adds an accusation, a guilt flag and a sentence.
  - It has two kinds: `Defendant` and `Respondent`.
  - `react_to_sentence()` and `receive_advice(advice)` return text.
- `courtsim.trial`
  - `Trial` has a `TrialType` (`PENAL` or `CIVIL`).
  - All trials share one score: `Trial.add_score(value)` adds to it and
    `Trial.total_score()` returns it.
- `courtsim.judge`
  - `Judge` has years of experience and a `Specialization`.
  - It comes in three styles: `StrictJudge`, `EmpatheticJudge` and
    `BalancedJudge`.
  - `style()`, `analyze_evidence()` and `hear_witnesses()` return text.
  - When read with `update_from`, a specialization other than 0 or 1 becomes
    civil.
- `courtsim.collection`
  - `ElementList` is an ordered, iterable list.
  - `get(index)` raises `IndexError` for an index outside the list.
  - `show_all(out)` writes each element on its own line.
- `courtsim.evidence`
  - Provides `AudioEvidence`, `DocumentEvidence` and `WitnessEvidence`.
  - Each piece of evidence starts out invalid.
  - `validate()` decides whether it is valid. `importance()` rates it, and
    valid evidence gains extra weight.
  - `label()` and `description()` return text.
- `courtsim.strategy`
  - Provides `AggressiveStrategy`, `EmotionalStrategy` and
    `BalancedStrategy`.
  - `advise(accused, evidence, judge, trial)` returns written advice.
  - `score_actions(actions, accused, evidence, judge, trial)` adjusts a
    mapping of action names to scores in place. An action missing from the
    mapping starts at 0.
  - `Strategy.list_actions()` returns a numbered menu of the available
    actions.
  - `apply_action(option)` adds the chosen action's value to the shared
    trial score. Every available action currently has the value 0.
- `courtsim.lawyer`
  - `Lawyer` keeps clients and counts the cases won (`win_case()`).
  - It hands advice, scoring and actions to the strategy set with
    `set_strategy`.
  - A lawyer with no strategy answers every request for advice with
    `"Inca ma gandesc"`, and its `score_actions` and `apply_action` then
    change nothing.

## What the package does not do

The `courtsim` command does not run a trial. It only reads and echoes
integers. To put a case together, create the people, evidence, judge, trial
and lawyer yourself and call their methods from Python. Nothing is saved
between runs.