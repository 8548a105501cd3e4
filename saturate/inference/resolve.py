"""
Propositional binary resolution.

Given two clauses, find an atom that is positive in one and negative in
the other, cancel it, and merge what remains. A resolvent that contains
some atom with both signs is a tautology and is thrown away.

When two clauses clash on more than one atom, cancelling any one of them
leaves the others clashing, so every such resolvent is a tautology.
resolve() and resolve_all() therefore always agree on what survives;
resolve_all() just makes that explicit.
"""

from typing import Optional

from ..core.state import Clause


def clashing_atoms(a: Clause, b: Clause) -> tuple:
    """(atoms positive in a and negative in b, atoms negative in a and positive in b)"""
    return a.positive & b.negative, a.negative & b.positive


def resolve_on(a: Clause, b: Clause, atom, positive_in_a: bool) -> Optional[Clause]:
    """Cancel one clashing atom between a and b. None if the result is a tautology."""
    if positive_in_a:
        positive = (a.positive - {atom}) | b.positive
        negative = a.negative | (b.negative - {atom})
    else:
        positive = a.positive | (b.positive - {atom})
        negative = (a.negative - {atom}) | b.negative

    resolvent = Clause(positive, negative, source=(a.key, b.key))
    if resolvent.is_tautology:
        return None
    return resolvent


def resolve(a: Clause, b: Clause) -> Optional[Clause]:
    """
    Binary resolution between two clauses.

    Cancels the smallest clashing atom. If that atom clashes both ways,
    the positive-in-a case is used. Returns None when the clauses do not
    clash or the resolvent is a tautology.
    """
    x, y = clashing_atoms(a, b)
    if not x and not y:
        return None
    atom = min(x | y)
    return resolve_on(a, b, atom, atom in x)


def resolve_all(a: Clause, b: Clause) -> list:
    """One resolvent per clashing atom, tautologies dropped, in atom order."""
    x, y = clashing_atoms(a, b)
    results = []
    for atom in sorted(x):
        resolvent = resolve_on(a, b, atom, True)
        if resolvent is not None:
            results.append(resolvent)
    for atom in sorted(y):
        resolvent = resolve_on(a, b, atom, False)
        if resolvent is not None and resolvent not in results:
            results.append(resolvent)
    return results
