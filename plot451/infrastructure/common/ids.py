"""Conversion between string identities and integer primary keys."""

from plot451.domain.common.entity import EntityId


def to_primary_key(entity_id: EntityId) -> int | None:
    """Return the integer key behind an id, or None if it cannot name a row."""
    value = entity_id.value
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)
