"""Word definition lookup loaded from a CSV dictionary."""

import csv
import logging
from pathlib import Path
from typing import Iterable, Mapping

from .constants import NOT_IN_DICTIONARY, SOURCE_ENCODING
from .exceptions import SourceLoadError

logger = logging.getLogger(__name__)


class DefinitionStore:
    """Read-only word -> definition mapping."""

    def __init__(self, definitions: Mapping[str, str]):
        self._definitions: dict[str, str] = dict(definitions)

    @classmethod
    def empty(cls) -> "DefinitionStore":
        return cls({})

    @classmethod
    def from_rows(cls, rows: Iterable[list[str]]) -> "DefinitionStore":
        """Build from (word, definition) rows. Later rows override earlier ones."""
        definitions: dict[str, str] = {}
        for row in rows:
            if len(row) < 2:
                continue
            word = row[0].strip()
            if word:
                definitions[word] = row[1]
        return cls(definitions)

    @classmethod
    def from_file(cls, path: str | Path) -> "DefinitionStore":
        """Load a CSV dictionary. Raises SourceLoadError on failure."""
        path = Path(path)
        try:
            with open(path, encoding=SOURCE_ENCODING, newline="") as f:
                store = cls.from_rows(csv.reader(f))
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            logger.error(f"Failed to read dictionary {path}: {e}")
            raise SourceLoadError(str(path), str(e)) from e

        logger.info(f"Loaded dictionary from {path}: {len(store)} definitions")
        return store

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, word: object) -> bool:
        return word in self._definitions

    def lookup(self, word: str) -> str | None:
        return self._definitions.get(word)

    def definition_of(self, word: str) -> str:
        """Stored definition, or the NOT_IN_DICTIONARY sentinel."""
        definition = self._definitions.get(word)
        return NOT_IN_DICTIONARY if definition is None else definition
