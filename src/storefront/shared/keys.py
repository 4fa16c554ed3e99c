"""Deterministic identities for records that must be unique per natural key."""

import uuid

STOREFRONT_NAMESPACE = uuid.UUID("5d0c5a8e-2f4b-4c55-9a7e-1f3f0c9b6a21")


def derived_id(*parts) -> str:
    """Return a stable UUID string for the given key parts.

    Two writers computing the id for the same key get the same value, so the
    second insert lands on the first record instead of creating a duplicate.
    """
    return str(uuid.uuid5(STOREFRONT_NAMESPACE, ":".join(str(part) for part in parts)))
