"""
Unit and property-based tests for Clause and SaturationState.

Core claims:
    - Clause equality and hashing ignore provenance (source, generation, label)
    - Clauses are immutable
    - is_tautology holds exactly when an atom occurs with both signs
    - subsumes is reflexive, transitive, and the subset test on both sides
    - SaturationState survives save/load
"""

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from saturate.core.state import (
    Clause, SaturationState, sorted_clauses,
    RUNNING, SATURATED, BUDGET_EXCEEDED, STOPPED,
)


# ── Generators ────────────────────────────────────────────────────────────────

atoms = st.sampled_from(["a", "b", "c", "d"])

@st.composite
def clauses(draw, max_size=3):
    return Clause(
        positive=draw(st.frozensets(atoms, max_size=max_size)),
        negative=draw(st.frozensets(atoms, max_size=max_size)),
    )


# ── Clause ───────────────────────────────────────────────────────────────────

class TestClauseIdentity:
    def test_sets_are_coerced_to_frozensets(self):
        c = Clause(positive={"a"}, negative=["b", "b"])
        assert c.positive == frozenset({"a"})
        assert c.negative == frozenset({"b"})
        assert isinstance(c.negative, frozenset)

    def test_equality_is_order_independent(self):
        c1 = Clause(positive=["a", "b"], negative=["c"])
        c2 = Clause(positive=["b", "a"], negative=["c"])
        assert c1 == c2
        assert hash(c1) == hash(c2)

    def test_provenance_ignored_by_equality(self):
        c1 = Clause({"a"}, label="one", source=("x", "y"), generation=3)
        c2 = Clause({"a"}, label="two")
        assert c1 == c2
        assert len({c1, c2}) == 1

    def test_sign_matters(self):
        assert Clause(positive={"a"}) != Clause(negative={"a"})

    def test_immutable(self):
        c = Clause(positive={"a"})
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.positive = frozenset({"b"})

    def test_unit_constructor(self):
        assert Clause.unit("a") == Clause(positive={"a"})
        assert Clause.unit("a", sign=False) == Clause(negative={"a"})
        assert Clause.unit("a").is_unit


class TestClausePredicates:
    def test_tautology(self):
        assert Clause(positive={"a", "b"}, negative={"a"}).is_tautology
        assert not Clause(positive={"a"}, negative={"b"}).is_tautology

    def test_empty_clause_is_not_tautology(self):
        assert not Clause().is_tautology
        assert Clause().is_empty

    def test_subsumes_subset_on_both_sides(self):
        general = Clause(positive={"a"}, negative={"b"})
        specific = Clause(positive={"a", "c"}, negative={"b", "d"})
        assert general.subsumes(specific)
        assert not specific.subsumes(general)

    def test_subsumes_requires_matching_sign(self):
        assert not Clause(positive={"a"}).subsumes(Clause(negative={"a"}))

    def test_empty_clause_subsumes_everything(self):
        assert Clause().subsumes(Clause(positive={"a"}, negative={"b"}))

    def test_subsumes_itself(self):
        c = Clause(positive={"a"}, negative={"b"})
        assert c.subsumes(c)


class TestClauseNames:
    def test_name_orders_by_atom(self):
        c = Clause(positive={"ice"}, negative={"sun", "money"})
        assert c.name == "ice | ~money | ~sun"

    def test_empty_name(self):
        assert Clause().name == "[]"

    def test_content_includes_label(self):
        c = Clause(positive={"movie"}, label="we go")
        assert c.content == "[we go] movie"

    def test_sort_key_puts_shorter_first(self):
        long = Clause(positive={"a", "b"})
        short = Clause(negative={"z"})
        assert sorted_clauses([long, short, Clause()]) == [Clause(), short, long]


class TestClauseProperties:

    @given(clauses())
    def test_subsumption_reflexive(self, c):
        assert c.subsumes(c)

    @given(clauses(), clauses(), clauses())
    def test_subsumption_transitive(self, c1, c2, c3):
        if c1.subsumes(c2) and c2.subsumes(c3):
            assert c1.subsumes(c3)

    @given(clauses(), clauses())
    def test_mutual_subsumption_is_equality(self, c1, c2):
        if c1.subsumes(c2) and c2.subsumes(c1):
            assert c1 == c2

    @given(clauses())
    def test_tautology_iff_shared_atom(self, c):
        assert c.is_tautology == bool(c.positive & c.negative)


# ── SaturationState ──────────────────────────────────────────────────────────

def make_state():
    a = Clause({"a"}, label="a holds")
    b = Clause({"b"}, {"a"}, label="a implies b")
    ab = Clause({"b"}, source=(b.key, a.key), generation=1)
    state = SaturationState(kb=frozenset({a, ab}))
    state.archive = {c.key: c for c in (a, b, ab)}
    state.generation = 1
    state.history.append({"round": 1, "pairs": 1, "candidates": 1,
                          "added": [ab.name], "removed": [b.name], "kb_size": 2})
    return state


class TestStateSerialization:
    def test_round_trip(self):
        state = make_state()
        restored = SaturationState.from_dict(state.to_dict())
        assert restored.kb == state.kb
        assert restored.archive == state.archive
        assert restored.history == state.history
        assert restored.generation == 1
        assert restored.status == RUNNING

    def test_provenance_preserved(self):
        state = make_state()
        restored = SaturationState.from_dict(state.to_dict())
        b = next(c for c in restored.kb if c == Clause({"b"}))
        assert b.source == (Clause({"b"}, {"a"}).key, Clause({"a"}).key)
        assert b.parent_names == ("~a | b", "a")
        assert b.generation == 1
        a = next(c for c in restored.kb if c == Clause({"a"}))
        assert a.label == "a holds"

    def test_json_round_trip(self, tmp_path):
        state = make_state()
        state.halt(SATURATED, "no resolvents")
        path = str(tmp_path / "state.json")
        state.save(path)
        restored = SaturationState.load(path)
        assert restored.kb == state.kb
        assert restored.status == SATURATED
        assert restored.halt_reason == "no resolvents"

    def test_round_trip_with_equal_names(self):
        neg = Clause(negative={"x"})
        atom = Clause(positive={"~x"})
        state = SaturationState(kb=frozenset({neg, atom}))
        state.archive = {c.key: c for c in (neg, atom)}
        restored = SaturationState.from_dict(state.to_dict())
        assert restored.kb == state.kb
        assert len(restored.archive) == 2
        assert restored.archive[atom.key] == atom
        assert restored.archive[neg.key] == neg

    def test_missing_key_raises(self):
        with pytest.raises(KeyError):
            SaturationState.from_dict({"kb": []})


class TestStateStatus:
    def test_new_state_running(self):
        assert not SaturationState().halted

    def test_halt(self):
        state = SaturationState()
        state.halt(BUDGET_EXCEEDED, "round budget of 3 exhausted")
        assert state.halted
        assert state.status == BUDGET_EXCEEDED

    @pytest.mark.parametrize("status", [BUDGET_EXCEEDED, STOPPED])
    def test_resume_clears_budget_and_stop(self, status):
        state = SaturationState()
        state.halt(status, "whatever")
        state.resume()
        assert not state.halted
        assert state.halt_reason == ""

    def test_resume_keeps_saturation(self):
        state = SaturationState()
        state.halt(SATURATED, "no resolvents")
        state.resume()
        assert state.status == SATURATED
