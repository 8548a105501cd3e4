"""
Domain: small propositional knowledge bases.

weather        -- the sun/money/ice/movie/cry scenario (satisfiable; derives money)
contradiction  -- x and ~x (derives the empty clause immediately)
chain          -- a four-step implication chain (derives its last link)
"""

from ..core.state import Clause
from ..core.notation import parse_clause


def make_weather_facts() -> list:
    """
    Axioms:
        ~sun | ~money | ice     sun and money -> ice cream
        ~money | ice | movie    money -> ice cream or a movie
        ~movie | money          movies cost money
        ~movie | ~ice           no ice cream at the movies
        movie                   we go to the movies
        sun | money | cry       sunny, or money, or tears

    Saturation derives money, ~ice and ~sun, but never the empty clause.
    """
    return [
        parse_clause("~sun | ~money | ice", label="sun and money give ice cream"),
        parse_clause("~money | ice | movie", label="money buys ice cream or a movie"),
        parse_clause("~movie | money", label="movies cost money"),
        parse_clause("~movie | ~ice", label="no ice cream at the movies"),
        parse_clause("movie", label="we go to the movies"),
        parse_clause("sun | money | cry", label="sun, money or tears"),
    ]


def make_contradiction_facts() -> list:
    return [
        Clause.unit("x", label="x holds"),
        Clause.unit("x", sign=False, label="x does not hold"),
    ]


def make_chain_facts() -> list:
    """
    rain -> wet -> slippery -> careful -> slow, with rain given.
    Saturation ends with every link as a unit clause.
    """
    return [
        parse_clause("rain", label="it rains"),
        parse_clause("~rain | wet", label="rain makes things wet"),
        parse_clause("~wet | slippery", label="wet is slippery"),
        parse_clause("~slippery | careful", label="slippery calls for care"),
        parse_clause("~careful | slow", label="care is slow"),
    ]
