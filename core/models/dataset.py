"""
Dataset Reference Model.

A stage produces exactly one dataset. The dashboard only needs to know
whether that dataset is cached and how to label its link.

Exports:
    DatasetRef: Immutable reference to a produced dataset
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .enums import StorageLevel


class DatasetRef(BaseModel):
    """
    Reference to the dataset a stage produces.

    Example:
        DatasetRef(dataset_id=7, name="parsed_events",
                   storage_level=StorageLevel.MEMORY_ONLY)
    """

    model_config = ConfigDict(frozen=True)

    dataset_id: int = Field(..., ge=0, description="Dataset id (unique per application)")
    name: Optional[str] = Field(default=None, description="Optional human-readable name")
    storage_level: StorageLevel = Field(
        default=StorageLevel.NONE,
        description="Persistence level; NONE means not cached"
    )

    @property
    def is_cached(self) -> bool:
        """True when the dataset is persisted at any level."""
        return self.storage_level != StorageLevel.NONE

    @property
    def display_name(self) -> str:
        """Name for link text, falling back to the numeric id."""
        if self.name:
            return self.name
        return str(self.dataset_id)
