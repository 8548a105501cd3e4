"""
Incorporation: keeping the knowledge base a subsumption antichain.

A new clause is dropped if something already in the KB subsumes it.
Otherwise every KB member it subsumes is removed and it is added.
Both functions return a new frozenset; the KB passed in is never touched.
"""

from .state import Clause, sorted_clauses


def incorporate_clause(clause: Clause, kb: frozenset, verbose: bool = False) -> frozenset:
    """Insert one clause into kb, removing members it makes redundant."""
    for existing in kb:
        if existing.subsumes(clause):
            if verbose and existing != clause:
                print(f"  [subsumed] {clause.name} by {existing.name}")
            return kb

    redundant = {existing for existing in kb if clause.subsumes(existing)}
    if verbose:
        for existing in sorted_clauses(redundant):
            print(f"  [back-subsumed] {existing.name} by {clause.name}")

    return (kb - redundant) | {clause}


def incorporate(candidates, kb: frozenset, verbose: bool = False) -> frozenset:
    """
    Fold candidates into kb one at a time.

    The result depends on insertion order, so candidates are always
    processed in canonical clause order (shortest first, then by atoms).
    Shorter clauses going first means a candidate is usually rejected
    before it could be inserted and then removed again.
    """
    kb = frozenset(kb)
    for clause in sorted_clauses(candidates):
        kb = incorporate_clause(clause, kb, verbose=verbose)
    return kb
