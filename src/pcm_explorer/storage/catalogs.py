"""
In-memory catalogs of PCM records and property definitions.

Both catalogs are read-only after load: the only mutation is replace(),
which swaps the whole sequence for a newly parsed one.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import pandas as pd

from ..models.materials import PcmRecord, PropertyDefinition

logger = logging.getLogger(__name__)


def _distinct(values: Iterable[str]) -> List[str]:
    """Distinct values in first-seen order."""
    return list(dict.fromkeys(values))


class PcmCatalog:
    """
    Catalog of phase-change materials.

    Keeps every parsed row in source order. Lookup by id resolves
    duplicates to the last parsed row.
    """

    def __init__(self, records: Optional[Iterable[PcmRecord]] = None):
        self._records: Tuple[PcmRecord, ...] = ()
        self._by_id: Dict[str, PcmRecord] = {}
        self.replace(records or [])

    def replace(self, records: Iterable[PcmRecord]) -> None:
        """
        Replace the whole catalog with a newly parsed sequence.

        Args:
            records: Parsed PcmRecord objects in source order
        """
        self._records = tuple(records)
        # Last parsed wins for duplicate ids
        self._by_id = {record.id: record for record in self._records}

        duplicates = len(self._records) - len(self._by_id)
        if duplicates:
            logger.warning(f"PCM catalog contains {duplicates} duplicate id(s), last row wins")

    @property
    def records(self) -> Tuple[PcmRecord, ...]:
        return self._records

    @property
    def is_empty(self) -> bool:
        return not self._records

    def get(self, pcm_id: str) -> Optional[PcmRecord]:
        """Find a record by id."""
        return self._by_id.get(pcm_id)

    def ids(self) -> List[str]:
        """Distinct ids in first-seen order."""
        return _distinct(record.id for record in self._records)

    def to_dataframe(self) -> pd.DataFrame:
        """Tabular view with the source column names."""
        rows = [record.model_dump(by_alias=True) for record in self._records]
        return pd.DataFrame(rows)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PcmRecord]:
        return iter(self._records)


class PropertyModelCatalog:
    """
    Catalog of polynomial property definitions.

    Lookup by (pcm_id, property_type) returns the first definition in
    source order. Invalid definitions are kept and reported, not dropped.
    """

    def __init__(self, definitions: Optional[Iterable[PropertyDefinition]] = None):
        self._definitions: Tuple[PropertyDefinition, ...] = ()
        self.replace(definitions or [])

    def replace(self, definitions: Iterable[PropertyDefinition]) -> None:
        """
        Replace the whole catalog with a newly parsed sequence.

        Args:
            definitions: Parsed PropertyDefinition objects in source order
        """
        self._definitions = tuple(definitions)

        invalid = self.invalid_definitions()
        if invalid:
            logger.warning(
                f"{len(invalid)} property definition(s) are not usable: "
                + ", ".join(f"{d.pcm_id}/{d.property_type}" for d in invalid)
            )

    @property
    def definitions(self) -> Tuple[PropertyDefinition, ...]:
        return self._definitions

    @property
    def is_empty(self) -> bool:
        return not self._definitions

    def find(self, pcm_id: str, property_type: str) -> Optional[PropertyDefinition]:
        """
        Find the authoritative definition for a material and property.

        Args:
            pcm_id: Material identifier
            property_type: Property key

        Returns:
            First matching PropertyDefinition or None
        """
        return next(
            (d for d in self._definitions if d.matches(pcm_id, property_type)),
            None,
        )

    def for_pcm(self, pcm_id: str) -> List[PropertyDefinition]:
        """All definitions referencing a material, in source order."""
        return [d for d in self._definitions if d.pcm_id == pcm_id]

    def distinct_pcm_ids(self) -> List[str]:
        return _distinct(d.pcm_id for d in self._definitions)

    def distinct_property_types(self) -> List[str]:
        return _distinct(d.property_type for d in self._definitions)

    def invalid_definitions(self) -> List[PropertyDefinition]:
        """Definitions that cannot be evaluated (non-finite fields or tmin >= tmax)."""
        return [d for d in self._definitions if not d.is_valid()]

    def to_dataframe(self) -> pd.DataFrame:
        rows = [d.model_dump(by_alias=True) for d in self._definitions]
        return pd.DataFrame(rows)

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[PropertyDefinition]:
        return iter(self._definitions)
