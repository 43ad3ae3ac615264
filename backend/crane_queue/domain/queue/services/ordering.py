"""Per-crane ordering allocator."""


def next_ord(current_max: int | None) -> int:
    """
    Next sequence number for a crane's queue.

    ``current_max`` must be read in the same unit of work as the insert that
    uses the result; gaps left by deleted items are never reused.
    """
    if current_max is None or current_max < 1:
        return 1
    return current_max + 1
