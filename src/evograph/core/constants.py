"""Centralized layout and formatting constants.

All magic numbers used by the spacing calculator, the graph builders and
the condition formatter live here.
"""

from types import MappingProxyType
from typing import Mapping

# ------------------------------------------------------------------ #
# Condition text
# ------------------------------------------------------------------ #
UNKNOWN_CONDITION: str = "Unknown"
NO_SPECIAL_CONDITIONS: str = "No special conditions"
UNKNOWN_SPECIES: str = "specific Pokémon"
CLAUSE_SEPARATOR: str = " and "

# Evolutions whose trigger cannot be expressed with the generic fields,
# keyed "<from species>-<to species>".
SPECIAL_EVOLUTION_CASES: Mapping[str, str] = MappingProxyType({
    "primeape-annihilape": "Level up after using Rage Fist 20 times",
    "pawmo-pawmot": "Level up after walking 1000 steps with Let's Go!",
    "bramblin-brambleghast": "Level up after walking 1000 steps with Let's Go!",
    "rellor-rabsca": "Level up after walking 1000 steps with Let's Go!",
    "finizen-palafin": "Level up to 38 while connected to another player via the Union Circle",
    "bisharp-kingambit": "Level up after defeating three Bisharp that hold a Leader's Crest",
    "gimmighoul-gholdengo": "Level up with 999 Gimmighoul Coins in the bag",
    "meltan-melmetal": "Evolves with 400 Meltan Candies in Pokémon GO",
    "magneton-magnezone": "Level up in a special magnetic field or use a Thunder Stone",
    "farfetchd-sirfetchd": "Land three critical hits in a single battle with Galarian Farfetch'd",
    "applin-flapple": "Use Tart Apple",
    "applin-appletun": "Use Sweet Apple",
    "applin-dipplin": "Use Syrupy Apple",
    "dipplin-hydrapple": "Level up knowing Dragon Cheer",
})

TRIGGER_CLAUSES: Mapping[str, str] = MappingProxyType({
    "spin": "Spin",
    "tower-of-darkness": "Tower of Darkness",
    "tower-of-waters": "Tower of Waters",
})

PHYSICAL_STAT_CLAUSES: Mapping[int, str] = MappingProxyType({
    1: "When Attack > Defense",
    0: "When Attack = Defense",
    -1: "When Attack < Defense",
})

# ------------------------------------------------------------------ #
# Sibling spacing (gap between nodes sharing a rank)
# ------------------------------------------------------------------ #
MAX_SPACED_SIBLINGS: int = 8
SINGLE_SIBLING_SPACING: int = 60
SIBLING_FILL_RATIO: float = 0.95
MIN_SIBLING_SPACING_TB: int = 80
MIN_SIBLING_SPACING_LR: int = 80

# ------------------------------------------------------------------ #
# Rank spacing (gap between evolution stages)
# ------------------------------------------------------------------ #
SINGLE_RANK_SPACING: int = 50
EDGE_LABEL_RESERVE: int = 96
RANK_BUFFER_DENSE: int = 20  # more than DENSE_RANK_THRESHOLD ranks
RANK_BUFFER_SPARSE: int = 40
DENSE_RANK_THRESHOLD: int = 3
VERTICAL_RANK_FILL_RATIO: float = 0.8
MIN_VERTICAL_RANK_SPACING: int = 120
WIDE_SIBLING_THRESHOLD: int = 7

# (min container width, max horizontal rank gap), widest first
RANK_SPACING_CEILINGS: tuple[tuple[int, int], ...] = (
    (1536, 220),
    (1280, 200),
    (1024, 180),
    (768, 160),
    (640, 140),
)
DEFAULT_RANK_SPACING_CEILING: int = 120

# ------------------------------------------------------------------ #
# Node sizing
# ------------------------------------------------------------------ #
MIN_RANK_GAP: int = 20
MIN_SIBLING_GAP: int = 20
VIRTUAL_HEIGHT: int = 1000
MAX_NODE_SIZE: int = 180

# ------------------------------------------------------------------ #
# Viewport breakpoints (min-width media queries), widest first
# ------------------------------------------------------------------ #
BREAKPOINTS: tuple[int, ...] = (1536, 1280, 1024, 768, 640)
DEFAULT_BREAKPOINT: int = 480

# ------------------------------------------------------------------ #
# Responsive desktop graph
# ------------------------------------------------------------------ #
MANY_DIRECT_EVOLUTIONS: int = 3  # more children than this switches to TB
MIN_FILL_RANK_SPACING: int = 80
