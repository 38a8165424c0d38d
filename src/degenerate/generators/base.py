"""Sampling front end.

Strategies are normally consumed by Hypothesis-driven tests. The Sampler
draws concrete values outside a test run (for the CLI, fixtures and
profiles) by driving a throwaway @given function with a fixed seed, no
example database and the generate phase only.
"""

from typing import Any, Iterator
import logging

from hypothesis import HealthCheck, Phase, given, seed as hypothesis_seed, settings
from hypothesis.strategies import SearchStrategy
from pydantic import BaseModel, Field

from degenerate.errors import InvalidArgument
from degenerate.generators.registry import GeneratorRegistry, get_global_generator_registry
from degenerate.utils.helpers import generate_seed

logger = logging.getLogger(__name__)


class GeneratedRecord(BaseModel):
    """A single sampled value."""

    value: Any = Field(..., description="The sampled value")
    sequence_number: int = Field(default=0, description="Record sequence number")


class GeneratedDataset(BaseModel):
    """A batch of values sampled from one generator."""

    generator_name: str = Field(..., description="Name of the source generator")
    records: list[GeneratedRecord] = Field(default_factory=list, description="Sampled records")
    seed: int | None = Field(default=None, description="Random seed used")
    total_count: int = Field(default=0, description="Total number of records")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Dataset metadata")

    def __iter__(self) -> Iterator[GeneratedRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def values(self) -> list[Any]:
        return [record.value for record in self.records]


def sample(strategy: SearchStrategy, count: int = 1, seed: int | None = None) -> list[Any]:
    """Draw up to count values from a strategy.

    Fewer values are returned when Hypothesis exhausts the strategy's search
    space first. Errors raised while drawing propagate unchanged.

    Args:
        strategy: The strategy to draw from
        count: Maximum number of values to draw
        seed: Optional seed for reproducible draws

    Returns:
        The drawn values, in draw order
    """
    if count < 1:
        raise InvalidArgument(f"count must be at least 1, got {count}")

    values: list[Any] = []

    @settings(
        max_examples=count,
        database=None,
        phases=[Phase.generate],
        suppress_health_check=list(HealthCheck),
        deadline=None,
        report_multiple_bugs=False,
    )
    @given(strategy)
    def collect(value: Any) -> None:
        values.append(value)

    if seed is not None:
        collect = hypothesis_seed(seed)(collect)

    collect()
    logger.debug("Sampled %d values (requested %d, seed %s)", len(values), count, seed)
    return values


class Sampler:
    """Draws datasets from strategies or registered generator names."""

    def __init__(self, seed: int | None = None, registry: GeneratorRegistry | None = None):
        """Initialize the sampler.

        Args:
            seed: Optional random seed for deterministic sampling
            registry: Generator registry used to resolve names, defaults to
                the global registry
        """
        self._seed = seed
        self._registry = registry

    @property
    def seed(self) -> int | None:
        return self._seed

    @seed.setter
    def seed(self, value: int | None) -> None:
        self._seed = value

    @property
    def registry(self) -> GeneratorRegistry:
        if self._registry is None:
            self._registry = get_global_generator_registry()
        return self._registry

    def sample(self, strategy: SearchStrategy, count: int = 1) -> list[Any]:
        return sample(strategy, count, self._seed)

    def resolve(self, generator: str | SearchStrategy, **options: Any) -> SearchStrategy:
        """Turn a registered generator name into a strategy.

        Raises:
            KeyError: If the name is not registered
        """
        if isinstance(generator, SearchStrategy):
            return generator
        strategy = self.registry.create(generator, **options)
        if strategy is None:
            raise KeyError(f"Generator '{generator}' not found")
        return strategy

    def generate(
        self,
        generator: str | SearchStrategy,
        count: int = 1,
        **options: Any,
    ) -> GeneratedDataset:
        """Sample a dataset from a generator.

        Args:
            generator: A registered generator name or a strategy
            count: Maximum number of records
            **options: Options passed to the generator factory

        Returns:
            A GeneratedDataset recording the seed that produced it
        """
        strategy = self.resolve(generator, **options)
        seed = self._seed if self._seed is not None else generate_seed()
        values = sample(strategy, count, seed)

        name = generator if isinstance(generator, str) else repr(strategy)
        return GeneratedDataset(
            generator_name=name,
            records=[
                GeneratedRecord(value=value, sequence_number=i)
                for i, value in enumerate(values)
            ],
            seed=seed,
            total_count=len(values),
            metadata={"requested_count": count, "options": options},
        )
