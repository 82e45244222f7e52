"""
Catalog entities.

Exports:
- MediaRecord: One movie or series entry
- RecordCollection: Records targeting one table
"""

from seeder.core.entities.media import MediaRecord, RecordCollection

__all__ = [
    "MediaRecord",
    "RecordCollection",
]
