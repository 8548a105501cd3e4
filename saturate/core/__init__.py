from .state import Clause, SaturationState
from .engine import BudgetExceeded, initial_state, saturation_round, run_saturation, solve
from .incorporate import incorporate_clause, incorporate
from .notation import is_plain_atom, parse_literal, parse_clause, parse_facts
from .proof import (
    found_empty_clause, kb_entails, entails, is_satisfiable,
    extract_derivation, print_derivation,
)

__all__ = [
    "Clause", "SaturationState",
    "BudgetExceeded", "initial_state", "saturation_round", "run_saturation", "solve",
    "incorporate_clause", "incorporate",
    "is_plain_atom", "parse_literal", "parse_clause", "parse_facts",
    "found_empty_clause", "kb_entails", "entails", "is_satisfiable",
    "extract_derivation", "print_derivation",
]
