"""
Domain registry.

Each domain is a dict describing a demonstration knowledge base:
    make_facts:   () -> list[Clause]
    query:        clause text to check against the saturated KB [optional]
    description:  str
"""

from .resolution import make_weather_facts, make_contradiction_facts, make_chain_facts
from .pigeonhole import make_pigeonhole_facts


DOMAINS = {
    "weather": {
        "make_facts":  make_weather_facts,
        "query":       "money",
        "description": "Sun, money, ice cream and movies: satisfiable, derives money",
    },
    "contradiction": {
        "make_facts":  make_contradiction_facts,
        "description": "x and ~x: derives the empty clause",
    },
    "chain": {
        "make_facts":  make_chain_facts,
        "query":       "slow",
        "description": "Implication chain: rain -> wet -> slippery -> careful -> slow",
    },
    "pigeonhole": {
        "make_facts":  make_pigeonhole_facts,
        "description": "Three pigeons, two holes: unsatisfiable, needs many rounds",
    },
}
