"""Record profiles - declarative record shapes built from named generators.

A profile names a generator for every field and marks which fields may be
absent. It contains no generation logic: to_spec resolves it against a
GeneratorRegistry into a GeneratorSpec for map_of.
"""

from typing import Any

from hypothesis.strategies import SearchStrategy
from pydantic import BaseModel, Field, model_validator

from degenerate.combinators.spec import GeneratorSpec, optional_key
from degenerate.combinators.structural import map_of, vector_of
from degenerate.generators.registry import GeneratorRegistry, get_global_generator_registry


class FieldConfig(BaseModel):
    """Configuration for one field of a record."""

    generator: str | None = Field(default=None, description="Registered generator name")
    optional: bool = Field(default=False, description="Whether the field may be absent")
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Options passed to the generator factory"
    )
    fields: dict[str, "FieldConfig"] | None = Field(
        default=None,
        description="Nested record fields"
    )
    min_items: int | None = Field(default=None, ge=0, description="Minimum list length")
    max_items: int | None = Field(default=None, ge=0, description="Maximum list length")

    @model_validator(mode="after")
    def _check_source(self) -> "FieldConfig":
        if (self.generator is None) == (self.fields is None):
            raise ValueError("A field needs exactly one of 'generator' or 'fields'")
        return self

    @property
    def is_list(self) -> bool:
        return self.min_items is not None or self.max_items is not None

    def to_value(self, registry: GeneratorRegistry) -> Any:
        """Resolve this field into a strategy or a nested GeneratorSpec."""
        if self.fields is not None:
            value: Any = _fields_to_spec(self.fields, registry)
        else:
            value = registry.create(self.generator, **self.options)
            if value is None:
                raise ValueError(f"Unknown generator '{self.generator}'")

        if self.is_list:
            return vector_of(value, self.min_items or 0, self.max_items)
        return value


class RecordProfile(BaseModel):
    """A named record shape with sampling defaults."""

    name: str = Field(..., description="Profile name")
    description: str = Field(default="", description="Profile description")
    seed: int | None = Field(
        default=None,
        description="Random seed for reproducibility"
    )
    count: int = Field(default=10, ge=1, description="Number of records to sample")
    fields: dict[str, FieldConfig] = Field(
        default_factory=dict,
        description="Record fields"
    )

    def to_spec(self, registry: GeneratorRegistry | None = None) -> GeneratorSpec:
        """Resolve the profile against a registry."""
        return _fields_to_spec(self.fields, registry or get_global_generator_registry())

    def to_strategy(self, registry: GeneratorRegistry | None = None) -> SearchStrategy:
        return map_of(self.to_spec(registry))

    def add_field(self, name: str, field: FieldConfig) -> None:
        self.fields[name] = field


def _fields_to_spec(fields: dict[str, FieldConfig], registry: GeneratorRegistry) -> GeneratorSpec:
    mapping = {}
    for name, field in fields.items():
        key = optional_key(name) if field.optional else name
        mapping[key] = field.to_value(registry)
    return GeneratorSpec.from_mapping(mapping)
