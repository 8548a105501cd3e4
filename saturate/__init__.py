"""
Saturate: deductive closure of propositional CNF by binary resolution.

Repeatedly resolves every pair of clauses in a knowledge base and folds
the resolvents back in, keeping the KB subsumption-minimal, until no
round adds anything new.

Usage:
    python -m saturate --kb weather
    python -m saturate --kb pigeonhole --rounds 20
    python -m saturate --file facts.cnf --query "~sun"
"""

from .core.state import Clause, SaturationState
from .core.engine import BudgetExceeded, initial_state, saturation_round, run_saturation, solve
from .core.incorporate import incorporate_clause, incorporate
from .core.notation import parse_clause, parse_facts
from .core.proof import (
    found_empty_clause, kb_entails, entails, is_satisfiable,
    extract_derivation, print_derivation,
)
from .inference.resolve import resolve, resolve_all

__all__ = [
    "Clause", "SaturationState",
    "BudgetExceeded", "initial_state", "saturation_round", "run_saturation", "solve",
    "incorporate_clause", "incorporate",
    "parse_clause", "parse_facts",
    "found_empty_clause", "kb_entails", "entails", "is_satisfiable",
    "extract_derivation", "print_derivation",
    "resolve", "resolve_all",
]
