"""
Queries over a saturated KB, and derivation extraction.

entails() and is_satisfiable() sit on top of solve(): once the KB is
saturated, a clause follows from the facts exactly when some KB member
subsumes it. extract_derivation() walks resolvent source links back to
the input facts.
"""

from .state import Clause, SaturationState
from .engine import solve


def found_empty_clause(state: SaturationState) -> bool:
    """Stop condition: has the empty clause (contradiction) been derived?"""
    return any(c.is_empty for c in state.kb)


def kb_entails(kb, query: Clause) -> bool:
    """Does some clause of an already saturated kb subsume query?"""
    return any(c.subsumes(query) for c in kb)


def entails(facts, query: Clause, **kwargs) -> bool:
    """
    Saturate facts, then check whether query follows.

    An unsatisfiable set of facts entails every query, since the empty
    clause subsumes everything. kwargs go to solve(); BudgetExceeded
    propagates.
    """
    return kb_entails(solve(facts, **kwargs), query)


def is_satisfiable(facts, **kwargs) -> bool:
    return not any(c.is_empty for c in solve(facts, **kwargs))


def extract_derivation(state: SaturationState, target: Clause = None) -> list:
    """
    Walk back from target through source links.

    target defaults to the empty clause. Returns a list of (clause, depth)
    pairs ordered from input facts to target, or [] if target is not in
    the KB.
    """
    if target is None:
        target = next((c for c in state.kb if c.is_empty), None)
    else:
        target = next((c for c in state.kb if c == target), None)
    if target is None:
        return []

    derivation = []
    visited = set()

    def walk(clause, depth):
        if clause.key in visited:
            return
        visited.add(clause.key)
        derivation.append((clause, depth))
        for parent_key in clause.source:
            if parent_key in state.archive:
                walk(state.archive[parent_key], depth + 1)

    walk(target, 0)
    derivation.reverse()
    return derivation


def print_derivation(state: SaturationState, target: Clause = None):
    """Pretty-print the derivation tree."""
    derivation = extract_derivation(state, target)
    if not derivation:
        print("No derivation found.")
        return
    print(f"\n{'='*60}")
    print("DERIVATION")
    print(f"{'='*60}")
    for i, (clause, depth) in enumerate(derivation):
        indent = "  " * depth
        if clause.source:
            a, b = clause.parent_names
            src = f"  [from: {a} + {b}]"
        elif clause.label:
            src = f"  [fact: {clause.label}]"
        else:
            src = "  [fact]"
        print(f"  {i+1}. {indent}{clause.name}{src}")
    print(f"{'='*60}")
    if derivation[-1][0].is_empty:
        print("  Empty clause derived -> the facts are unsatisfiable.")
