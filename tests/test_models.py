"""Unit tests for evograph.core.models – parsing raw chain snapshots."""
import pytest
from pydantic import ValidationError

from evograph.core.models import EvolutionChain, EvolutionCondition, LocalizedMixin, NamedResource, Species


class TestSpecies:
    def test_camel_case_payload(self, make_species):
        species = Species.model_validate(
            make_species(2, "ivysaur", parent=1, targets=[(3, [{"minLevel": 32}])])
        )
        assert species.evolves_from_species_id == 1
        assert species.evolves_to_species[0].id == 3
        assert species.evolves_to_species[0].pokemon_evolutions[0].min_level == 32
        assert species.default_pokemon.sprite == "https://img.example/2.png"
        assert not species.is_root

    def test_flat_parent_id(self):
        species = Species.model_validate({"id": 2, "name": "b", "evolvesFromSpeciesId": 1})
        assert species.evolves_from_species_id == 1

    def test_snake_case_payload(self):
        species = Species.model_validate({
            "id": 2,
            "name": "b",
            "evolves_from_species_id": None,
            "evolves_to_species": [{"id": 3, "evolutionConditions": [{"min_level": 5}]}],
        })
        assert species.is_root
        assert species.evolves_to_species[0].pokemon_evolutions[0].min_level == 5

    def test_null_parent_is_root(self, make_species):
        assert Species.model_validate(make_species(1, "a")).is_root

    def test_no_default_variety(self, make_species):
        assert Species.model_validate(make_species(1, "a", default=False)).default_pokemon is None

    def test_display_name(self, make_species):
        assert Species.model_validate(make_species(1, "mr-mime", names=["Mr. Mime"])).display_name == "Mr. Mime"
        assert Species.model_validate(make_species(1, "mr-mime")).display_name == "mr-mime"

    def test_frozen(self, make_species):
        species = Species.model_validate(make_species(1, "a"))
        with pytest.raises(ValidationError):
            species.name = "b"


class TestEvolutionCondition:
    def test_named_resources_from_strings(self):
        condition = EvolutionCondition.model_validate({"evolutionTrigger": "trade", "heldItem": "kings-rock"})
        assert condition.evolution_trigger == NamedResource(name="trade")
        assert condition.held_item.name == "kings-rock"

    def test_malformed_fields_become_none(self):
        condition = EvolutionCondition.model_validate({
            "minLevel": "lots",
            "location": 12,
            "minHappiness": 220,
        })
        assert condition.min_level is None
        assert condition.location is None
        assert condition.min_happiness == 220

    def test_unknown_keys_ignored(self):
        condition = EvolutionCondition.model_validate({"id": 7, "gender": 1, "minLevel": 10})
        assert condition.min_level == 10

    def test_localized_party_type(self):
        condition = EvolutionCondition.model_validate(
            {"partyTypeId": 17, "partyType": {"name": "dark", "names": [{"name": "Dark"}]}}
        )
        assert condition.party_type.display_name == "Dark"


class TestLocalizedNames:
    def test_shared_lookup(self, make_species):
        species = Species.model_validate(make_species(122, "mr-mime", names=["Mr. Mime"]))
        resource = NamedResource.model_validate({"name": "mr-mime", "names": [{"name": "Mr. Mime"}]})
        assert isinstance(species, LocalizedMixin)
        assert isinstance(resource, LocalizedMixin)
        assert species.display_name == resource.display_name == "Mr. Mime"

    def test_empty_localized_name_falls_back(self):
        resource = NamedResource.model_validate({"name": "dark", "names": [{"name": ""}]})
        assert resource.display_name == "dark"


class TestEvolutionChain:
    def test_lookups(self, eevee_chain):
        chain = EvolutionChain.model_validate(eevee_chain)
        assert chain.root().id == 133
        assert set(chain.species_by_id()) == {133, 134, 135, 136}
        assert chain.names_by_id()[135] == "jolteon"

    def test_species_alias(self, make_species):
        chain = EvolutionChain.model_validate({"species": [make_species(1, "a")]})
        assert len(chain.pokemon_species) == 1

    def test_no_root(self, make_species):
        chain = EvolutionChain.model_validate({"pokemonSpecies": [make_species(2, "b", parent=1)]})
        assert chain.root() is None
