"""
CLI entry point. Run as: python -m saturate --kb <name>
"""

import argparse
import sys

from .core.state import SaturationState, SATURATED
from .core.engine import initial_state, run_saturation
from .core.notation import parse_clause, parse_facts
from .core.proof import found_empty_clause, kb_entails, print_derivation
from .visualization import print_state, print_history, export_dot
from .domains import DOMAINS


def build_parser():
    parser = argparse.ArgumentParser(
        prog="saturate",
        description="Propositional resolution closure with subsumption",
    )
    parser.add_argument("--kb", choices=list(DOMAINS.keys()), default="weather",
                        help="Which built-in knowledge base to saturate")
    parser.add_argument("--file",   type=str, default=None,
                        help="Read facts from a file, one clause per line")
    parser.add_argument("--rounds", type=int, default=100, help="Max rounds")
    parser.add_argument("--max-clauses", type=int, default=None,
                        help="Halt once the KB grows past this many clauses")
    parser.add_argument("--all-literals", action="store_true",
                        help="Resolve on every clashing atom of a pair")
    parser.add_argument("--workers", type=int, default=1,
                        help="Threads for the pair scan")
    parser.add_argument("--query",  type=str, default=None,
                        help="Clause to check against the saturated KB")
    parser.add_argument("--stop-on-empty", action="store_true",
                        help="Stop as soon as the empty clause is derived")
    parser.add_argument("--save",   type=str, default=None, help="Save state to file")
    parser.add_argument("--load",   type=str, default=None, help="Load state from file")
    parser.add_argument("--dot",    type=str, default=None, help="Export DOT graph to file")
    parser.add_argument("--quiet",  action="store_true",    help="Less output")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    verbose = not args.quiet

    try:
        query = parse_clause(args.query) if args.query else None
    except ValueError as e:
        print(f"Bad query: {e}", file=sys.stderr)
        return 2

    # --- Load or build initial state ---
    if args.load:
        state = SaturationState.load(args.load)
        state.resume()
        print(f"Loaded state from {args.load} (round {state.generation})")
    else:
        if args.file:
            with open(args.file) as f:
                try:
                    facts = parse_facts(f)
                except ValueError as e:
                    print(f"Bad fact in {args.file}: {e}", file=sys.stderr)
                    return 2
            print(f"Facts: {args.file}")
        else:
            facts = DOMAINS[args.kb]["make_facts"]()
            print(f"Knowledge base: {args.kb}")
            if query is None and "query" in DOMAINS[args.kb]:
                query = parse_clause(DOMAINS[args.kb]["query"])
        state = initial_state(facts, verbose=verbose)

    print_state(state)

    # --- Run ---
    try:
        state = run_saturation(
            state,
            max_rounds=args.rounds,
            stop_fn=found_empty_clause if args.stop_on_empty else None,
            save_path=args.save,
            all_literals=args.all_literals,
            workers=args.workers,
            max_clauses=args.max_clauses,
            verbose=verbose,
        )
    except KeyboardInterrupt:
        print("\nInterrupted.")

    print_state(state)
    if verbose:
        print_history(state)

    if found_empty_clause(state):
        print_derivation(state)
    else:
        print("\nEmpty clause not derived: no contradiction found.")

    if query is not None:
        verdict = "entailed" if kb_entails(state.kb, query) else "not entailed"
        if state.status != SATURATED:
            verdict += f" (KB not saturated: {state.halt_reason or state.status})"
        print(f"Query {query.name}: {verdict}")

    if args.dot:
        export_dot(state, args.dot)

    if args.save:
        state.save(args.save)
        print(f"State saved to {args.save}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
