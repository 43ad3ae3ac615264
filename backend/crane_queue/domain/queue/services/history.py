"""Pure helpers for archiving finished work."""

MS_PER_MINUTE = 60_000


def duration_minutes(started_at: int | None, ended_at: int) -> int | None:
    """
    Whole minutes between two millisecond timestamps, rounded half up.

    Returns None when the item never recorded a start, so "unknown" stays
    distinct from zero-length work.
    """
    if started_at is None:
        return None
    # Integer form of floor(x + 0.5); exact for negative spans too
    return (ended_at - started_at + MS_PER_MINUTE // 2) // MS_PER_MINUTE


def history_record_id(crane_id: str, ord: int, finalize_ts: int) -> str:
    """Archive key; the same finalize event always maps to the same record."""
    return f"{crane_id}-{ord}-{finalize_ts}"
