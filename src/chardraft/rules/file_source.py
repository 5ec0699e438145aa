"""
Ruleset files as a RuleDataProvider.

Loads races, classes and backgrounds from a local JSON or YAML file:

```yaml
name: SRD 5.1
version: "1.0"
content:
  races:
    - id: human
      name: Human
      ability_bonuses: {strength: 1, dexterity: 1}
  classes:
    - id: fighter
      hit_dice: 1d10
      saving_throws: [strength, constitution]
      skills_count: 2
      available_skills: [athletics, intimidation, perception]
  backgrounds:
    - id: soldier
      skill_proficiencies: [athletics, intimidation]
```

A flat layout (sections at the top level, no "content" key) is accepted too.
"""

import json
import logging
from pathlib import Path
from threading import RLock
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError as SchemaError

from ..exceptions import RuleDataNotFoundError, RuleDataUnavailableError
from ..models import BackgroundData, ClassData, RaceData

logger = logging.getLogger("chardraft.rules")


class FileRuleDataProvider:
    """Provider reading a ruleset file, loaded lazily on first lookup.

    Entries that fail schema validation are skipped with a warning so one bad
    homebrew record does not take down the whole ruleset. A file that cannot
    be read or parsed makes every lookup raise RuleDataUnavailableError.
    """

    SUPPORTED_EXTENSIONS = {".json", ".yaml", ".yml"}

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self.name: str | None = None
        self.version: str | None = None
        self._races: dict[str, RaceData] = {}
        self._classes: dict[str, ClassData] = {}
        self._backgrounds: dict[str, BackgroundData] = {}
        self._loaded = False
        self._lock = RLock()

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load(self) -> None:
        """Read and parse the ruleset file. Safe to call more than once."""
        with self._lock:
            if self._loaded:
                return

            suffix = self.path.suffix.lower()
            if suffix not in self.SUPPORTED_EXTENSIONS:
                raise RuleDataUnavailableError(
                    f"Unsupported ruleset format: {suffix}. "
                    f"Supported: {', '.join(sorted(self.SUPPORTED_EXTENSIONS))}"
                )

            try:
                raw_content = self.path.read_text(encoding="utf-8")
            except OSError as e:
                raise RuleDataUnavailableError(f"Failed to read ruleset {self.path}: {e}") from e

            try:
                if suffix == ".json":
                    data = json.loads(raw_content)
                else:
                    data = yaml.safe_load(raw_content)
            except (json.JSONDecodeError, yaml.YAMLError) as e:
                raise RuleDataUnavailableError(f"Failed to parse {suffix} ruleset: {e}") from e

            if not isinstance(data, dict):
                raise RuleDataUnavailableError("Ruleset must be a JSON/YAML object at the top level")

            self.name = data.get("name", self.path.stem)
            self.version = str(data.get("version", "1.0"))
            content = data.get("content", data)
            if not isinstance(content, dict):
                raise RuleDataUnavailableError(
                    f"Ruleset content in {self.path} must be an object, got {type(content).__name__}"
                )

            self._races = self._parse_section(content, "races", RaceData)
            self._classes = self._parse_section(content, "classes", ClassData)
            self._backgrounds = self._parse_section(content, "backgrounds", BackgroundData)
            self._loaded = True

            logger.info(
                f"Loaded ruleset '{self.name}' from {self.path}: "
                f"{len(self._races)} races, {len(self._classes)} classes, "
                f"{len(self._backgrounds)} backgrounds"
            )

    def _parse_section(self, content: dict[str, Any], section: str, model: type[BaseModel]) -> dict:
        entries = content.get(section) or []
        if not isinstance(entries, list):
            raise RuleDataUnavailableError(
                f"Section '{section}' in {self.path} must be a list, got {type(entries).__name__}"
            )

        records = {}
        for item in entries:
            if not isinstance(item, dict):
                logger.warning(f"Skipping non-object entry in {section} of {self.path}: {item!r}")
                continue
            try:
                record = model.model_validate(_ensure_id(dict(item)))
            except SchemaError as e:
                logger.warning(f"Invalid {section} entry in {self.path}: {e}")
                continue
            records[record.id] = record
        return records

    # =========================================================================
    # RuleDataProvider
    # =========================================================================

    def get_race_data(self, race_id: str) -> RaceData:
        self.load()
        record = self._races.get(race_id)
        if record is None:
            raise RuleDataNotFoundError("race", race_id)
        return record

    def get_class_data(self, class_id: str) -> ClassData:
        self.load()
        record = self._classes.get(class_id)
        if record is None:
            raise RuleDataNotFoundError("class", class_id)
        return record

    def get_background_data(self, background_id: str) -> BackgroundData:
        self.load()
        record = self._backgrounds.get(background_id)
        if record is None:
            raise RuleDataNotFoundError("background", background_id)
        return record


def _ensure_id(data: dict) -> dict:
    """Derive a missing ID from the entry's name ("Half Orc" -> "half_orc")."""
    if not data.get("id") and data.get("name"):
        data["id"] = str(data["name"]).strip().lower().replace(" ", "_").replace("'", "").replace("-", "_")
    for subrace in data.get("subraces") or []:
        if isinstance(subrace, dict):
            _ensure_id(subrace)
    return data
