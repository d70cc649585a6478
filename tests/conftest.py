"""
Shared fixtures for the test suite.
"""
import sys
from pathlib import Path

import pytest

# Ensure src/ is importable without an editable install
SRC = Path(__file__).resolve().parent.parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def species(
    id,
    name,
    parent=None,
    targets=(),
    *,
    default=True,
    names=None,
    varieties=None,
):
    """Build one raw (camelCase) species record.

    ``targets`` is a sequence of ``(target_id, [condition, ...])`` pairs.
    """
    if varieties is None:
        varieties = [{
            "isDefault": default,
            "pokemon": {
                "id": id,
                "name": name,
                "sprites": {"frontDefault": f"https://img.example/{id}.png"},
                "types": [{"slot": 1, "type": {"name": "normal"}}],
            },
        }]
    return {
        "id": id,
        "name": name,
        "names": [{"name": n} for n in (names or [])],
        "evolvesFromSpecies": {"id": parent} if parent is not None else None,
        "evolvesToSpecies": [
            {"id": target_id, "pokemonEvolutions": list(conditions)}
            for target_id, conditions in targets
        ],
        "varieties": varieties,
    }


@pytest.fixture
def make_species():
    return species


@pytest.fixture
def linear_chain():
    """Bulbasaur-style A -> B -> C chain evolving by level."""
    return {
        "id": 1,
        "pokemonSpecies": [
            species(1, "bulbasaur", targets=[(2, [{"minLevel": 16, "evolutionTrigger": {"name": "level-up"}}])]),
            species(2, "ivysaur", parent=1, targets=[(3, [{"minLevel": 32, "evolutionTrigger": {"name": "level-up"}}])]),
            species(3, "venusaur", parent=2),
        ],
    }


@pytest.fixture
def eevee_chain():
    """Root with three direct stone evolutions."""
    def stone(item):
        return [{"evolutionTrigger": {"name": "use-item"}, "evolutionItem": {"name": item}}]

    return {
        "id": 67,
        "pokemonSpecies": [
            species(133, "eevee", targets=[
                (134, stone("water-stone")),
                (135, stone("thunder-stone")),
                (136, stone("fire-stone")),
            ]),
            species(134, "vaporeon", parent=133),
            species(135, "jolteon", parent=133),
            species(136, "flareon", parent=133),
        ],
    }
