"""
Classification rule configuration.

Loads the ordered keyword table from a YAML file so the categories'
keywords and their priority can be tuned without code changes.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from disclosure_sorter.core.classification import Category, CategoryRule


class ClassificationConfigLoader:
    """
    Loads the classifier's keyword table from a YAML configuration file.

    Expected YAML format (list order is match priority):
    ```yaml
    categories:
      - category: contracting_public
        description: "CONTRATACIÓN PÚBLICA ..."
        keywords:
          - LICITACIÓN
          - ADJUDICACIÓN
      - category: concession_grant
        keywords:
          - CONCESIÓN
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Classification rules file not found: {config_path}")

    def load_rules(self) -> list[CategoryRule]:
        """
        Load and parse the ordered category rules.

        Returns:
            Category rules in priority order

        Raises:
            ValueError: If YAML is invalid or a rule definition is malformed
        """
        with open(self.config_path, encoding="utf-8") as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(config, dict) or "categories" not in config:
            raise ValueError("Configuration file must contain 'categories' section")

        entries = config["categories"]
        if not isinstance(entries, list) or not entries:
            raise ValueError("'categories' must be a non-empty list")

        rules = [self._parse_rule(entry, idx) for idx, entry in enumerate(entries)]

        seen: set[Category] = set()
        for rule in rules:
            if rule.category in seen:
                raise ValueError(f"Category '{rule.category.value}' is defined more than once")
            seen.add(rule.category)

        return rules

    def _parse_rule(self, entry: Any, idx: int) -> CategoryRule:
        """
        Parse a single category definition.

        Args:
            entry: The category definition from YAML
            idx: Position of the definition (for error messages)

        Returns:
            Parsed CategoryRule

        Raises:
            ValueError: If the definition is invalid
        """
        if not isinstance(entry, dict):
            raise ValueError(f"Category definition #{idx} must be a mapping")
        if "category" not in entry:
            raise ValueError(f"Category definition #{idx} is missing 'category'")

        keywords = entry.get("keywords")
        if not isinstance(keywords, list):
            raise ValueError(f"Keywords for category '{entry['category']}' must be a list")

        try:
            return CategoryRule(
                category=entry["category"],
                keywords=tuple(keywords),
                description=entry.get("description", ""),
            )
        except PydanticValidationError as e:
            raise ValueError(f"Invalid category definition #{idx}: {e}") from e
