"""
Column layouts of the RDBES sampling-unit record types.

Each level of the RDBES hierarchy that can carry a sample (vessel selection,
fishing trip, fishing operation, ...) records the same design variables under
level-prefixed column names. The layouts are spelled out explicitly here so
that estimators select columns by level rather than by assembling names.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .exceptions import UnsupportedDesignError


@dataclass(frozen=True)
class SampleUnitColumns:
    """Design columns of one hierarchy level, plus the caller's parent link."""

    level: str
    id: str
    stratification: str
    stratum_name: str
    clustering: str
    parent_id: str

    @property
    def design_columns(self) -> list[str]:
        return [self.id, self.stratification, self.stratum_name, self.clustering]


class HierarchyLevel(str, Enum):
    """RDBES record types that describe sampled units."""

    VS = "VS"  # vessel selection
    FT = "FT"  # fishing trip
    FO = "FO"  # fishing operation (haul)
    LE = "LE"  # landing event
    TE = "TE"  # temporal event
    OS = "OS"  # onshore event
    LO = "LO"  # location
    SA = "SA"  # sample

    @classmethod
    def coerce(cls, value: Union["HierarchyLevel", str]) -> "HierarchyLevel":
        """Return the level for a record-type tag such as ``"FO"``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            known = ", ".join(level.value for level in cls)
            raise UnsupportedDesignError(
                f"Unknown sample unit type {value!r}; expected one of {known}",
                check="sample_unit_type",
            ) from None

    def columns(self, parent_id: str) -> SampleUnitColumns:
        """Column record for this level with ``parent_id`` as the parent link."""
        id_col, flag_col, name_col, cluster_col = _LEVEL_COLUMNS[self]
        return SampleUnitColumns(
            level=self.value,
            id=id_col,
            stratification=flag_col,
            stratum_name=name_col,
            clustering=cluster_col,
            parent_id=parent_id,
        )


_LEVEL_COLUMNS = {
    HierarchyLevel.VS: ("VSid", "VSstratification", "VSstratumName", "VSclustering"),
    HierarchyLevel.FT: ("FTid", "FTstratification", "FTstratumName", "FTclustering"),
    HierarchyLevel.FO: ("FOid", "FOstratification", "FOstratumName", "FOclustering"),
    HierarchyLevel.LE: ("LEid", "LEstratification", "LEstratumName", "LEclustering"),
    HierarchyLevel.TE: ("TEid", "TEstratification", "TEstratumName", "TEclustering"),
    HierarchyLevel.OS: ("OSid", "OSstratification", "OSstratumName", "OSclustering"),
    HierarchyLevel.LO: ("LOid", "LOstratification", "LOstratumName", "LOclustering"),
    HierarchyLevel.SA: ("SAid", "SAstratification", "SAstratumName", "SAclustering"),
}
