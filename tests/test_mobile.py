"""Unit tests for evograph.core.mobile – stage grouping for narrow screens."""
from evograph.core.mobile import MobileLayout, organize
from evograph.core.models import EvolutionChain


def ids(layout):
    return [[species.id for species in group] for group in layout.groups]


class TestNothingToRender:
    def test_none(self):
        assert organize(None) is None

    def test_no_species(self):
        assert organize({"pokemonSpecies": []}) is None
        assert organize(EvolutionChain()) is None

    def test_invalid_payload(self):
        assert organize({"pokemonSpecies": [{"id": "abc"}]}) is None


class TestLinear:
    def test_single_row_in_original_order(self, linear_chain):
        layout = organize(linear_chain)
        assert isinstance(layout, MobileLayout)
        assert layout.type == "linear"
        assert ids(layout) == [[1, 2, 3]]

    def test_single_species(self, make_species):
        layout = organize({"pokemonSpecies": [make_species(132, "ditto")]})
        assert layout.type == "linear"
        assert ids(layout) == [[132]]

    def test_order_is_input_order(self, make_species):
        chain = {"pokemonSpecies": [
            make_species(3, "c", parent=2),
            make_species(1, "a"),
            make_species(2, "b", parent=1),
        ]}
        assert ids(organize(chain)) == [[3, 1, 2]]


class TestBranching:
    def test_eevee(self, eevee_chain):
        layout = organize(eevee_chain)
        assert layout.type == "branching"
        assert ids(layout) == [[133], [134, 135, 136]]

    def test_root_group_first(self, make_species):
        chain = {"pokemonSpecies": [
            make_species(2, "b", parent=1),
            make_species(3, "c", parent=1),
            make_species(1, "a"),
        ]}
        assert ids(organize(chain)) == [[1], [2, 3]]

    def test_stage_order_follows_first_encounter(self, make_species):
        # Wurmple-style: two branches, each continuing one more stage
        chain = {"pokemonSpecies": [
            make_species(265, "wurmple"),
            make_species(266, "silcoon", parent=265),
            make_species(268, "cascoon", parent=265),
            make_species(269, "dustox", parent=268),
            make_species(267, "beautifly", parent=266),
        ]}
        assert ids(organize(chain)) == [[265], [266, 268], [269], [267]]

    def test_multiple_roots_share_first_group(self, make_species):
        chain = {"pokemonSpecies": [
            make_species(1, "a"),
            make_species(5, "e"),
        ]}
        layout = organize(chain)
        assert layout.type == "branching"
        assert ids(layout) == [[1, 5]]

    def test_without_root_group(self, make_species):
        chain = {"pokemonSpecies": [
            make_species(2, "b", parent=1),
            make_species(3, "c", parent=1),
        ]}
        assert ids(organize(chain)) == [[2, 3]]
