"""Profile Loader for loading record profiles from YAML files."""

from pathlib import Path
from typing import Any
import logging

import yaml

from degenerate.profiles.base import FieldConfig, RecordProfile

logger = logging.getLogger(__name__)


class ProfileLoader:
    """Loads record profiles from YAML files."""

    def load_file(self, path: Path | str) -> RecordProfile:
        """Load a profile from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Loaded RecordProfile instance
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Profile file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        logger.debug("Loaded profile file %s", path)
        return self._parse_profile(data)

    def load_from_string(self, content: str) -> RecordProfile:
        """Load a profile from a YAML string."""
        data = yaml.safe_load(content)
        return self._parse_profile(data)

    def _parse_profile(self, data: Any) -> RecordProfile:
        """Parse profile data from YAML structure."""
        if not isinstance(data, dict):
            raise ValueError("Profile must be a YAML mapping")
        if "name" not in data:
            raise ValueError("Profile must have a 'name' field")

        return RecordProfile.model_validate(data)

    def save_file(self, profile: RecordProfile, path: Path | str) -> None:
        """Save a profile to a YAML file.

        Args:
            profile: The profile to save
            path: Path for the output file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = profile.model_dump(exclude_none=True)

        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def load_profile(path: Path | str) -> RecordProfile:
    """Convenience function to load a profile from a file."""
    loader = ProfileLoader()
    return loader.load_file(path)


def example_profile(name: str = "user") -> RecordProfile:
    """A small profile showing required, optional, nested and list fields."""
    return RecordProfile(
        name=name,
        description="Example user record",
        count=5,
        fields={
            "email": FieldConfig(generator="email"),
            "website": FieldConfig(generator="url", optional=True),
            "phone": FieldConfig(generator="phone-number", optional=True),
            "joined": FieldConfig(generator="date", options={"format": "date"}),
            "address": FieldConfig(
                fields={
                    "country": FieldConfig(generator="country-code-2"),
                    "line1": FieldConfig(generator="safe-string", options={"min_length": 1, "max_length": 40}),
                },
            ),
            "balances": FieldConfig(generator="currency", min_items=0, max_items=3),
        },
    )
