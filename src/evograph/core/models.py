"""Evolution-chain input models.

Raw chain snapshots arrive as camelCase JSON from the Pokédex API. These
models parse them once into frozen objects; snake_case keys are accepted
as well so fixtures can be written either way.
"""

from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel


class ChainModel(BaseModel):
    """Base model for raw chain data."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class LocalizedName(ChainModel):
    name: str


class LocalizedMixin:
    """Display name lookup for models carrying ``name`` and ``names``."""

    @property
    def display_name(self) -> str:
        """Localized name when available, raw name otherwise."""
        if self.names and self.names[0].name:
            return self.names[0].name
        return self.name


class NamedResource(LocalizedMixin, ChainModel):
    """A named API resource (item, move, location, trigger, type)."""

    name: str
    names: list[LocalizedName] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _from_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"name": data}
        return data


class EvolutionCondition(ChainModel):
    """Requirements attached to one parent -> child evolution edge.

    Every field is optional. A field whose raw value does not parse is
    stored as ``None`` instead of failing the whole record.
    """

    min_level: int | None = None
    evolution_trigger: NamedResource | None = None
    evolution_item: NamedResource | None = None
    trade_species_id: int | None = None
    time_of_day: str | None = None
    location: NamedResource | None = None
    held_item: NamedResource | None = None
    known_move: NamedResource | None = None
    known_move_type: NamedResource | None = None
    min_happiness: int | None = None
    min_beauty: int | None = None
    min_affection: int | None = None
    needs_overworld_rain: bool | None = None
    party_species_id: int | None = None
    party_type_id: int | None = None
    party_type: NamedResource | None = None
    relative_physical_stats: int | None = None
    turn_upside_down: bool | None = None

    @field_validator("*", mode="wrap")
    @classmethod
    def _drop_malformed(cls, value: Any, handler: Any) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return None


class EvolutionTarget(ChainModel):
    """Reference from a species to one of the species it evolves into."""

    id: int
    pokemon_evolutions: list[EvolutionCondition] = Field(
        default_factory=list,
        validation_alias=AliasChoices(
            "pokemonEvolutions", "evolutionConditions", "pokemon_evolutions"
        ),
    )


class Sprites(ChainModel):
    front_default: str | None = None


class PokemonType(ChainModel):
    slot: int | None = None
    type: NamedResource

    @model_validator(mode="before")
    @classmethod
    def _from_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"type": {"name": data}}
        return data


class Pokemon(ChainModel):
    id: int | None = None
    name: str | None = None
    sprites: Sprites | None = None
    types: list[PokemonType] = Field(default_factory=list)

    @property
    def sprite(self) -> str | None:
        return self.sprites.front_default if self.sprites else None

    @property
    def type_names(self) -> list[str]:
        return [slot.type.name for slot in self.types]


class Variety(ChainModel):
    is_default: bool = False
    pokemon: Pokemon | None = None


class Species(LocalizedMixin, ChainModel):
    """A node in the evolution forest."""

    id: int
    name: str
    names: list[LocalizedName] = Field(default_factory=list)
    evolves_from_species_id: int | None = None
    evolves_to_species: list[EvolutionTarget] = Field(default_factory=list)
    varieties: list[Variety] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _flatten_parent_reference(cls, data: Any) -> Any:
        # The API nests the parent as {"evolvesFromSpecies": {"id": ...}}
        if isinstance(data, dict) and "evolvesFromSpeciesId" not in data:
            parent = data.get("evolvesFromSpecies")
            if isinstance(parent, dict) and "id" in parent:
                return {**data, "evolvesFromSpeciesId": parent["id"]}
        return data

    @property
    def is_root(self) -> bool:
        return self.evolves_from_species_id is None

    @property
    def default_pokemon(self) -> Pokemon | None:
        """Pokemon payload of the default variety, if any."""
        for variety in self.varieties:
            if variety.is_default:
                return variety.pokemon
        return None


class EvolutionChain(ChainModel):
    """All species reachable from one root."""

    id: int | None = None
    pokemon_species: list[Species] = Field(
        default_factory=list,
        validation_alias=AliasChoices("pokemonSpecies", "pokemon_species", "species"),
    )

    def species_by_id(self) -> dict[int, Species]:
        return {species.id: species for species in self.pokemon_species}

    def names_by_id(self) -> dict[int, str]:
        return {species.id: species.name for species in self.pokemon_species}

    def root(self) -> Species | None:
        """First species without a predecessor."""
        for species in self.pokemon_species:
            if species.is_root:
                return species
        return None
