"""Generator Registry for managing named generators."""

from dataclasses import dataclass
from typing import Any, Callable
import logging

from hypothesis.strategies import SearchStrategy

from degenerate.errors import InvalidArgument

logger = logging.getLogger(__name__)

GeneratorFactory = Callable[..., SearchStrategy]


@dataclass(frozen=True)
class RegisteredGenerator:
    """A named generator factory."""

    name: str
    factory: GeneratorFactory
    description: str = ""


def constant(strategy: SearchStrategy) -> GeneratorFactory:
    """Wrap a ready-made strategy as a factory that takes no options."""

    def factory(**options: Any) -> SearchStrategy:
        if options:
            raise InvalidArgument(
                f"Generator takes no options, got {', '.join(sorted(options))}"
            )
        return strategy

    return factory


class GeneratorRegistry:
    """Registry of named generators.

    Maps names used by profiles and the CLI to factories that build
    strategies from keyword options.
    """

    def __init__(self):
        self._generators: dict[str, RegisteredGenerator] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register the default generators."""
        from degenerate.generators import countries, network, numeric, structured
        from degenerate.generators.strings import char_safe, string_gen
        from degenerate.generators.temporal import date

        self.register("host-name", constant(network.host_name), "RFC 952 shaped host names")
        self.register("host-name-label", network.host_name_label, "A single host name label (minimum, maximum)")
        self.register("email", constant(network.email), "RFC 2822 dot-atom email addresses")
        self.register("email-local-part", constant(network.email_local_part), "Local part of an email address")
        self.register("custom-email", network.custom_email, "Email addresses with a top level domain from tlds")
        self.register("url", constant(network.url), "http and https URLs")
        self.register("json", constant(structured.json_document), "JSON text with an object or array root")
        self.register("any-map", constant(structured.any_map), "Arbitrary JSON-compatible dicts")
        self.register("finite-double", constant(numeric.finite_double), "Floats without infinities or NaN")
        self.register("currency", constant(numeric.currency), "Amounts >= 1.0 with two decimal places")
        self.register("phone-number", constant(numeric.phone_number), "Phone numbers starting 07 or 08")
        self.register("date", date, "Formatted dates (since, until, format)")
        self.register("country-code-2", constant(countries.country_code_2), "ISO-3166 alpha-2 codes")
        self.register("country-code-3", constant(countries.country_code_3), "ISO-3166 alpha-3 codes")
        self.register("string", string_gen, "Strings (fixed_length, min_length, max_length)")
        self.register(
            "safe-string",
            lambda **options: string_gen(char_gen=char_safe, **options),
            "Strings without control characters",
        )

    def register(self, name: str, factory: GeneratorFactory, description: str = "") -> None:
        """Register a generator factory under a name.

        Args:
            name: The name profiles and the CLI refer to
            factory: Callable building a strategy from keyword options
            description: Short human readable description
        """
        self._generators[name] = RegisteredGenerator(name, factory, description)
        logger.debug("Registered generator %s", name)

    def get(self, name: str) -> RegisteredGenerator | None:
        """Get a registered generator by name, or None if not found."""
        return self._generators.get(name)

    def create(self, name: str, **options: Any) -> SearchStrategy | None:
        """Build a strategy from a registered generator.

        Args:
            name: The generator name
            **options: Options passed to the factory

        Returns:
            A strategy or None if the name is not registered
        """
        entry = self.get(name)
        if entry is None:
            return None
        return entry.factory(**options)

    def list_names(self) -> list[str]:
        """List all registered generator names."""
        return list(self._generators.keys())

    def unregister(self, name: str) -> bool:
        """Remove a generator from the registry.

        Returns:
            True if removed, False if not found
        """
        if name in self._generators:
            del self._generators[name]
            return True
        return False

    def __contains__(self, name: str) -> bool:
        return name in self._generators

    def __iter__(self):
        return iter(self._generators.values())


_global_registry: GeneratorRegistry | None = None


def get_global_generator_registry() -> GeneratorRegistry:
    """Get the global generator registry singleton."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
    return _global_registry
