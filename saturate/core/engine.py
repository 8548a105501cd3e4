"""
The saturation loop.

Each round resolves every unordered pair of clauses in the current KB,
collects the resolvents, and folds them through incorporation to get the
next KB. The loop halts when a round produces no resolvents, or when
incorporating them changes nothing.

Rounds only read the KB they were given; the next generation is a new
frozenset. That makes the pair scan safe to spread over threads.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from itertools import combinations
from typing import Callable, Optional

from .state import (
    SaturationState, sorted_clauses,
    SATURATED, BUDGET_EXCEEDED, STOPPED,
)
from .incorporate import incorporate
from ..inference.resolve import resolve, resolve_all


class BudgetExceeded(RuntimeError):
    """The round or clause budget ran out before the KB saturated."""

    def __init__(self, state: SaturationState):
        super().__init__(state.halt_reason)
        self.state = state


def initial_state(facts, verbose: bool = True) -> SaturationState:
    """
    Normalize input facts into the first KB generation.

    Tautologies carry no information and are dropped here, so no KB
    generation ever contains one.
    """
    kept = []
    for fact in facts:
        if fact.is_tautology:
            if verbose:
                print(f"  [tautology] {fact.name}")
            continue
        kept.append(fact)

    state = SaturationState(kb=incorporate(kept, frozenset(), verbose=verbose))
    state.archive = {c.key: c for c in state.kb}
    return state


def _resolvents(pair, all_literals: bool) -> list:
    a, b = pair
    if all_literals:
        return resolve_all(a, b)
    resolvent = resolve(a, b)
    return [] if resolvent is None else [resolvent]


def collect_resolvents(kb, all_literals: bool = False, workers: int = 1) -> tuple:
    """
    Resolve every unordered pair of distinct clauses in kb.

    Pairs are taken in canonical order and results are merged in that
    same order after the whole scan, whether or not threads are used,
    so the first derivation of a duplicate resolvent always wins.

    Returns (candidates, pair_count). candidates is a list without
    structural duplicates.
    """
    pairs = list(combinations(sorted_clauses(kb), 2))

    if workers > 1 and len(pairs) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(lambda p: _resolvents(p, all_literals), pairs))
    else:
        results = [_resolvents(p, all_literals) for p in pairs]

    candidates = {}
    for resolvents in results:
        for resolvent in resolvents:
            candidates.setdefault(resolvent, resolvent)
    return list(candidates), len(pairs)


def saturation_round(
    state: SaturationState,
    all_literals: bool = False,
    workers: int = 1,
    max_clauses: Optional[int] = None,
    verbose: bool = True,
) -> SaturationState:
    """
    Execute one round of the saturation loop.

    Args:
        state:        current SaturationState
        all_literals: resolve on every clashing atom instead of one per pair
        workers:      threads for the pair scan; 1 means no pool
        max_clauses:  halt with budget_exceeded once the KB grows past this
        verbose:      print progress
    """
    if state.halted:
        return state

    state.generation += 1
    generation = state.generation
    if verbose:
        print(f"\n--- Round {generation}: {len(state.kb)} clauses ---")

    candidates, pair_count = collect_resolvents(
        state.kb, all_literals=all_literals, workers=workers,
    )
    candidates = [replace(c, generation=generation) for c in candidates]

    entry = {
        "round": generation,
        "pairs": pair_count,
        "candidates": len(candidates),
        "added": [],
        "removed": [],
        "kb_size": len(state.kb),
    }
    state.history.append(entry)

    if not candidates:
        state.halt(SATURATED, "no resolvents")
        if verbose:
            print("  Saturated: no resolvents")
        return state

    new_kb = incorporate(candidates, state.kb, verbose=verbose)
    if new_kb == state.kb:
        state.halt(SATURATED, "no new clauses")
        if verbose:
            print("  Saturated: every resolvent was subsumed")
        return state

    added = sorted_clauses(new_kb - state.kb)
    removed = sorted_clauses(state.kb - new_kb)
    for clause in added:
        state.archive.setdefault(clause.key, clause)
        if verbose:
            a, b = clause.parent_names
            print(f"  [new] {clause.name} (from {a} + {b})")

    state.kb = new_kb
    entry["added"] = [c.name for c in added]
    entry["removed"] = [c.name for c in removed]
    entry["kb_size"] = len(new_kb)

    if verbose:
        print(f"  KB: {len(new_kb)} clauses (+{len(added)} -{len(removed)})")

    if max_clauses is not None and len(new_kb) > max_clauses:
        state.halt(BUDGET_EXCEEDED, f"clause budget of {max_clauses} exceeded")
        if verbose:
            print(f"  [budget] {state.halt_reason}")

    return state


def run_saturation(
    state: SaturationState,
    max_rounds: Optional[int] = 100,
    stop_fn: Optional[Callable] = None,
    save_path: Optional[str] = None,
    max_clauses: Optional[int] = None,
    **kwargs,
) -> SaturationState:
    """
    Run rounds until saturated, stop condition met, or a budget runs out.

    Args:
        state:       initial state (see initial_state)
        max_rounds:  round budget for this call; None for no limit
        max_clauses: KB size ceiling, checked before every round and
                     after every fold
        stop_fn:     stop_fn(state) -> bool; halt early if True
        save_path:   if set, checkpoint state after each round
        **kwargs:    passed through to saturation_round
    """
    rounds = 0
    while not state.halted:
        if stop_fn and stop_fn(state):
            state.halt(STOPPED, "stop condition met")
            break
        if max_rounds is not None and rounds >= max_rounds:
            state.halt(BUDGET_EXCEEDED, f"round budget of {max_rounds} exhausted")
            break
        if max_clauses is not None and len(state.kb) > max_clauses:
            state.halt(BUDGET_EXCEEDED, f"clause budget of {max_clauses} exceeded")
            break
        state = saturation_round(state, max_clauses=max_clauses, **kwargs)
        rounds += 1
        if save_path:
            state.save(save_path)
    return state


def solve(facts, max_rounds: Optional[int] = 100, verbose: bool = False, **kwargs) -> frozenset:
    """
    Saturate a set of facts and return the final KB.

    Raises BudgetExceeded (carrying the partial state) if max_rounds or
    max_clauses runs out first. A stop_fn that fires returns the KB as
    it stood at that point.
    """
    state = initial_state(facts, verbose=verbose)
    state = run_saturation(state, max_rounds=max_rounds, verbose=verbose, **kwargs)
    if state.status == BUDGET_EXCEEDED:
        raise BudgetExceeded(state)
    return state.kb
