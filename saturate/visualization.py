"""
Visualization and reporting utilities.
"""

from .core.state import SaturationState, sorted_clauses


def print_state(state: SaturationState):
    """Print a summary of the current saturation state."""
    print(f"\n{'='*60}")
    print(f"Round: {state.generation}  Status: {state.status}"
          + (f" ({state.halt_reason})" if state.halt_reason else ""))
    print(f"Knowledge base ({len(state.kb)}):")
    for clause in sorted_clauses(state.kb):
        src = " (from {} + {})".format(*clause.parent_names) if clause.source else ""
        print(f"  {clause.content}{src}")
    print(f"{'='*60}")


def print_history(state: SaturationState):
    """Print the per-round history."""
    print(f"\n{'='*60}")
    print("Saturation history:")
    print(f"{'='*60}")
    for entry in state.history:
        added = ", ".join(entry["added"]) if entry["added"] else "(nothing new)"
        print(f"  Round {entry['round']}: {entry['pairs']} pairs, "
              f"{entry['candidates']} resolvents -> {added}")
        if entry["removed"]:
            print(f"    removed: {', '.join(entry['removed'])}")


def export_dot(state: SaturationState, path="saturate_graph.dot"):
    """
    Export the derivation graph as a DOT file for Graphviz visualization.

    One node per archived clause, with an edge from each parent to each
    resolvent. Clauses still in the KB are light blue; clauses that were
    back-subsumed along the way are light gray. Node ids come from the
    archive order, since two different clauses can share a printed name.
    """
    clauses = sorted_clauses(state.archive.values())
    ids = {c.key: f"c{i}" for i, c in enumerate(clauses)}
    with open(path, "w") as f:
        f.write("digraph saturate {\n")
        f.write("  rankdir=BT;\n")
        f.write("  node [shape=box, style=rounded];\n")

        for clause in clauses:
            label = clause.name.replace('"', '\\"')
            color = "lightblue" if clause in state.kb else "lightgray"
            f.write(f'  {ids[clause.key]} [label="{label}", fillcolor={color}, style=filled];\n')
            for parent in clause.source:
                if parent in ids:
                    f.write(f"  {ids[parent]} -> {ids[clause.key]};\n")
        f.write("}\n")
    print(f"Graph exported to {path}")
