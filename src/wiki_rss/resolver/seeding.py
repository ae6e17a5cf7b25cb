"""Seed derivation and candidate page identifier generation."""

from schemas.article import MAX_WIKI_PAGE_ID

MAX_PAGE_LOOKUP_ATTEMPTS = 14
PAGEID_STEP = 104_729  # prime


def seeded_hash(key: str) -> int:
    """Hash a string key to a non-negative integer.

    Accumulates ``hash * 31 + unit`` over the key's UTF-16 code units with
    32-bit signed wraparound, then takes the absolute value.

    Examples:
        >>> seeded_hash("")
        0
        >>> seeded_hash("abc")
        96354
    """
    data = key.encode("utf-16-le", "surrogatepass")
    value = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        value = (value * 31 + unit) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return abs(value)


def candidate_page_id(seed: int, attempt: int) -> int:
    """Return the page identifier to probe for ``attempt`` of ``seed``.

    Always in ``[1, MAX_WIKI_PAGE_ID]``.
    """
    return (seed + attempt * PAGEID_STEP) % MAX_WIKI_PAGE_ID + 1


def candidate_page_ids(seed: int, attempts: int = MAX_PAGE_LOOKUP_ATTEMPTS) -> list[int]:
    return [candidate_page_id(seed, attempt) for attempt in range(attempts)]
