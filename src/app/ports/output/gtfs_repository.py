from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models.record_store import GtfsRecordStore


class IGtfsRepository(ABC):
    """Port for loading GTFS tables into a sealed in-memory record store."""

    @abstractmethod
    def load_store(self) -> GtfsRecordStore:
        raise NotImplementedError
