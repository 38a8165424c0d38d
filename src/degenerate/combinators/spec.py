"""Tagged descriptions of aggregate shapes.

A GeneratorSpec is built once from a plain mapping. Each key is tagged as
required or optional and each value slot is tagged as a leaf strategy or a
nested spec, so the structural combinators only switch on tags.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Hashable, Iterator, Mapping

from hypothesis.strategies import SearchStrategy

from degenerate.errors import InvalidArgument


class KeyKind(str, Enum):
    """Whether an entry always appears in a generated aggregate."""

    REQUIRED = "required"
    OPTIONAL = "optional"


class ValueKind(str, Enum):
    """What occupies a value slot of a spec."""

    LEAF = "leaf"
    NESTED = "nested"


@dataclass(frozen=True)
class SpecKey:
    """A mapping key tagged with its presence policy."""

    name: Hashable
    kind: KeyKind = KeyKind.REQUIRED

    @property
    def is_optional(self) -> bool:
        return self.kind == KeyKind.OPTIONAL


def optional_key(name: Hashable) -> SpecKey:
    """Mark a key whose entry may be absent from a generated aggregate."""
    return SpecKey(name, KeyKind.OPTIONAL)


def required_key(name: Hashable) -> SpecKey:
    return SpecKey(name, KeyKind.REQUIRED)


@dataclass(frozen=True)
class SpecValue:
    """A value slot: either a strategy or a nested GeneratorSpec."""

    kind: ValueKind
    strategy: SearchStrategy | None = None
    spec: "GeneratorSpec | None" = None

    @classmethod
    def leaf(cls, strategy: SearchStrategy) -> "SpecValue":
        return cls(ValueKind.LEAF, strategy=strategy)

    @classmethod
    def nested(cls, spec: "GeneratorSpec") -> "SpecValue":
        return cls(ValueKind.NESTED, spec=spec)


@dataclass(frozen=True)
class GeneratorSpec:
    """An immutable, ordered set of tagged (key, value) entries."""

    entries: tuple[tuple[SpecKey, SpecValue], ...] = ()

    def __post_init__(self) -> None:
        seen: dict[Hashable, KeyKind] = {}
        for key, _ in self.entries:
            if key.name in seen:
                raise InvalidArgument(
                    f"Key {key.name!r} appears more than once "
                    f"({seen[key.name].value} and {key.kind.value})"
                )
            seen[key.name] = key.kind

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> "GeneratorSpec":
        """Build a spec from a mapping of keys to strategies or nested mappings.

        Keys that are not SpecKey instances are required keys. Values may be
        strategies, GeneratorSpec instances, or mappings (expanded recursively).

        Raises:
            InvalidArgument: For a non-mapping spec, a value that is neither a
                strategy nor a mapping, or a key given both as optional and
                required
        """
        if not isinstance(mapping, Mapping):
            raise InvalidArgument(
                f"Expected a mapping of keys to strategies, got {type(mapping).__name__}"
            )
        entries = []
        for key, value in mapping.items():
            if not isinstance(key, SpecKey):
                key = required_key(key)
            entries.append((key, _to_spec_value(key, value)))
        return cls(tuple(entries))

    @classmethod
    def coerce(cls, value: "GeneratorSpec | Mapping[Any, Any]") -> "GeneratorSpec":
        if isinstance(value, GeneratorSpec):
            return value
        return cls.from_mapping(value)

    def keys(self) -> list[SpecKey]:
        return [key for key, _ in self.entries]

    def required_names(self) -> set[Hashable]:
        return {key.name for key, _ in self.entries if not key.is_optional}

    def optional_names(self) -> set[Hashable]:
        return {key.name for key, _ in self.entries if key.is_optional}

    def __iter__(self) -> Iterator[tuple[SpecKey, SpecValue]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def _to_spec_value(key: SpecKey, value: Any) -> SpecValue:
    if isinstance(value, SearchStrategy):
        return SpecValue.leaf(value)
    if isinstance(value, GeneratorSpec):
        return SpecValue.nested(value)
    if isinstance(value, Mapping):
        return SpecValue.nested(GeneratorSpec.from_mapping(value))
    raise InvalidArgument(
        f"Value for key {key.name!r} must be a strategy or a mapping, "
        f"got {type(value).__name__}"
    )
