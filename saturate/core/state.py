"""
Core data structures: Clause and SaturationState.

These are the atoms of the whole system. Nothing in here depends on
inference rules, incorporation, or the saturation loop.

Literals are opaque atoms (any comparable, hashable token; usually str).
A Clause splits them by sign:

    Clause(positive={"ice"}, negative={"sun", "money"})
        ->  ~money | ~sun | ice

The empty clause [] is falsity: if it is ever derived, the facts it was
derived from are unsatisfiable.
"""

from dataclasses import dataclass, field
import json


RUNNING = "running"
SATURATED = "saturated"
BUDGET_EXCEEDED = "budget_exceeded"
STOPPED = "stopped"


@dataclass(frozen=True)
class Clause:
    """
    A disjunction of literals, stored as two atom sets.

    Equality and hashing are structural over (positive, negative) only.
    source, generation and label are provenance and never affect identity:
    the same clause derived twice from different parents is one clause.
    source holds the parents' keys, not their names: names are for
    printing only, and two different clauses can print alike.
    """
    positive: frozenset = frozenset()
    negative: frozenset = frozenset()
    source: tuple = field(default=(), compare=False)
    generation: int = field(default=0, compare=False)
    label: str = field(default="", compare=False)

    def __post_init__(self):
        object.__setattr__(self, "positive", frozenset(self.positive))
        object.__setattr__(self, "negative", frozenset(self.negative))
        object.__setattr__(self, "source", tuple(self.source))

    @classmethod
    def unit(cls, atom, sign: bool = True, label: str = "") -> "Clause":
        if sign:
            return cls(positive={atom}, label=label)
        return cls(negative={atom}, label=label)

    @property
    def is_tautology(self) -> bool:
        """True if some atom occurs both positively and negatively."""
        return not self.positive.isdisjoint(self.negative)

    def subsumes(self, other: "Clause") -> bool:
        """
        self subsumes other if both of its atom sets are subsets of other's.

        Non-strict: every clause subsumes itself, so an equal clause is
        always redundant against an existing one.
        """
        return self.positive <= other.positive and self.negative <= other.negative

    @property
    def key(self) -> tuple:
        """Structural identity: (positive, negative)."""
        return (self.positive, self.negative)

    @property
    def parent_names(self) -> tuple:
        return tuple(Clause(*key).name for key in self.source)

    @property
    def is_empty(self) -> bool:
        return not self.positive and not self.negative

    @property
    def is_unit(self) -> bool:
        return len(self.positive) + len(self.negative) == 1

    @property
    def literals(self) -> list:
        """(sign, atom) pairs ordered by atom, negative before positive."""
        lits = [(False, a) for a in self.negative] + [(True, a) for a in self.positive]
        return sorted(lits, key=lambda lit: (lit[1], lit[0]))

    @property
    def name(self) -> str:
        if self.is_empty:
            return "[]"
        return " | ".join(("" if sign else "~") + str(atom)
                          for sign, atom in self.literals)

    @property
    def content(self) -> str:
        if self.label:
            return f"[{self.label}] {self.name}"
        return self.name

    @property
    def sort_key(self) -> tuple:
        """Canonical order: shorter clauses first, then by atoms."""
        return (len(self.positive) + len(self.negative),
                tuple(sorted(self.positive)), tuple(sorted(self.negative)))

    def __repr__(self):
        return f"Clause({self.name})"


def sorted_clauses(clauses) -> list:
    return sorted(clauses, key=lambda c: c.sort_key)


@dataclass
class SaturationState:
    """
    Full state of the saturation loop, serializable for continuity.

    kb:          the current knowledge base generation (a frozenset antichain)
    archive:     every clause that has ever been a KB member, by key;
                 keeps the parents of back-subsumed clauses reachable
    history:     one entry per executed round
    generation:  number of rounds executed
    status:      running | saturated | budget_exceeded | stopped
    """
    kb: frozenset = frozenset()
    archive: dict = field(default_factory=dict)
    history: list = field(default_factory=list)
    generation: int = 0
    status: str = RUNNING
    halt_reason: str = ""

    @property
    def halted(self) -> bool:
        return self.status != RUNNING

    def halt(self, status: str, reason: str):
        self.status = status
        self.halt_reason = reason

    def resume(self):
        """Clear a budget or stop halt so the loop can continue. Saturation is final."""
        if self.status in (BUDGET_EXCEEDED, STOPPED):
            self.status = RUNNING
            self.halt_reason = ""

    def to_dict(self):
        def serialize(clause):
            return {"positive": sorted(clause.positive),
                    "negative": sorted(clause.negative),
                    "source": [[sorted(p), sorted(n)] for p, n in clause.source],
                    "generation": clause.generation,
                    "label": clause.label}

        return {
            "kb": [serialize(c) for c in sorted_clauses(self.kb)],
            "archive": [serialize(c) for c in sorted_clauses(self.archive.values())],
            "history": self.history,
            "generation": self.generation,
            "status": self.status,
            "halt_reason": self.halt_reason,
        }

    @classmethod
    def from_dict(cls, d):
        def deserialize(data):
            return Clause(frozenset(data["positive"]), frozenset(data["negative"]),
                          tuple((frozenset(p), frozenset(n))
                                for p, n in data.get("source", ())),
                          data.get("generation", 0), data.get("label", ""))

        state = cls()
        state.kb = frozenset(deserialize(c) for c in d["kb"])
        state.archive = {c.key: c for c in map(deserialize, d.get("archive", []))}
        state.history = d["history"]
        state.generation = d["generation"]
        state.status = d.get("status", RUNNING)
        state.halt_reason = d.get("halt_reason", "")
        return state

    def save(self, path="saturate_state.json"):
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path="saturate_state.json"):
        with open(path) as f:
            return cls.from_dict(json.load(f))
