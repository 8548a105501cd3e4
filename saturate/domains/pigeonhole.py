"""
Domain: the pigeonhole principle.

n pigeons, m holes. Atom "p{i}h{j}" means pigeon i sits in hole j.
Every pigeon needs a hole, and no hole holds two pigeons. With more
pigeons than holes this is unsatisfiable, and resolution has to work
hard to show it: the closure grows quickly even for tiny instances,
which makes it a good workload for the round and clause budgets.
"""

from itertools import combinations

from ..core.state import Clause


def atom(pigeon: int, hole: int) -> str:
    return f"p{pigeon}h{hole}"


def make_pigeonhole_facts(pigeons: int = 3, holes: int = 2) -> list:
    facts = []
    for i in range(1, pigeons + 1):
        facts.append(Clause(
            positive={atom(i, j) for j in range(1, holes + 1)},
            label=f"pigeon {i} has a hole",
        ))
    for j in range(1, holes + 1):
        for i, k in combinations(range(1, pigeons + 1), 2):
            facts.append(Clause(
                negative={atom(i, j), atom(k, j)},
                label=f"pigeons {i} and {k} do not share hole {j}",
            ))
    return facts
