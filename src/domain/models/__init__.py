from .gtfs import GtfsCalendar, GtfsRoute, GtfsStop, GtfsStopTime, GtfsTrip
from .record_store import GtfsRecordStore, RecordCollection

__all__ = [
    "GtfsCalendar",
    "GtfsRecordStore",
    "GtfsRoute",
    "GtfsStop",
    "GtfsStopTime",
    "GtfsTrip",
    "RecordCollection",
]
