"""
Parsing of raw batch entries into LocationRecord objects.

Usage:
    from ngo_nearby.core.utils.records import parse_location_record

    record = parse_location_record("Helping Hands, 123 Main St, Springfield")
    record.query  # "123 Main St, Springfield"
"""

from typing import Iterable, List

from ngo_nearby.models import LocationRecord

RECORD_FIELDS = 3


def parse_location_record(raw: str) -> LocationRecord:
    """
    Parse '<name>, <address line>, <city>' into a LocationRecord.

    Fields are split on commas and trimmed. There is no escaping, so a comma
    inside a field shifts the remaining fields; anything past the third field
    is dropped and missing fields come back as empty strings.

    Args:
        raw: One batch entry

    Returns:
        LocationRecord

    Example:
        >>> parse_location_record(" Helping Hands ,123 Main St,  Springfield ")
        LocationRecord(name='Helping Hands', address_line='123 Main St', city='Springfield')
    """
    parts = [part.strip() for part in raw.split(",")]
    parts += [""] * (RECORD_FIELDS - len(parts))
    name, address_line, city = parts[:RECORD_FIELDS]
    return LocationRecord(name=name, address_line=address_line, city=city)


def read_records(lines: Iterable[str]) -> List[str]:
    """
    Collect batch entries from text lines, skipping blanks and '#' comments.
    """
    records = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        records.append(line)
    return records
