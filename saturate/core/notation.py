"""
Text notation for clauses.

    "~sun | ~money | ice"    ->  Clause(positive={"ice"}, negative={"sun", "money"})
    "movie"                  ->  Clause(positive={"movie"})
    "[]"                     ->  the empty clause

Negation is "~" or "¬"; disjunction is "|" or "∨". This is the same
notation Clause.name produces, so parse_clause(c.name) == c whenever
every atom of c is_plain_atom(). Atoms are opaque to the rest of the
package, so a clause over atoms like "~x" or "[]" is fine to build
and saturate; it just cannot be written in this notation.
"""

from .state import Clause


NEGATIONS = ("~", "¬")
EMPTY = ("[]", "⊥")
SEPARATORS = ("|", "∨")


def is_plain_atom(atom) -> bool:
    """Can atom be written in this notation and read back unchanged?"""
    if not isinstance(atom, str):
        return False
    return (bool(atom) and atom not in EMPTY
            and not any(ch.isspace() for ch in atom)
            and not any(ch in atom for ch in NEGATIONS + SEPARATORS))


def parse_literal(text: str) -> tuple:
    """Returns (sign, atom)."""
    s = text.strip()
    sign = True
    while s and s[0] in NEGATIONS:
        sign = not sign
        s = s[1:].strip()
    if not s:
        raise ValueError(f"Invalid literal: {text!r}")
    if not is_plain_atom(s):
        raise ValueError(f"Invalid atom in literal: {text!r}")
    return sign, s


def parse_clause(text: str, label: str = "") -> Clause:
    s = text.strip()
    if s in EMPTY:
        return Clause(label=label)
    if not s:
        raise ValueError("Empty clause text; write [] for the empty clause")

    positive, negative = set(), set()
    for part in s.replace(SEPARATORS[1], SEPARATORS[0]).split(SEPARATORS[0]):
        sign, atom = parse_literal(part)
        (positive if sign else negative).add(atom)
    return Clause(positive, negative, label=label)


def parse_facts(lines) -> list:
    """
    Parse one clause per line. Blank lines and lines starting with '#'
    are skipped. A trailing '# comment' becomes the clause's label.
    """
    facts = []
    for line in lines:
        text, _, comment = line.partition("#")
        if not text.strip():
            continue
        facts.append(parse_clause(text, label=comment.strip()))
    return facts
