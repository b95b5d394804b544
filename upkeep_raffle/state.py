from enum import IntEnum


class RaffleState(IntEnum):
    OPEN = 0
    CALCULATING = 1


def select_winner(random_value: int, entrant_count: int) -> int:
    """Index of the winning entrant for a random word."""
    if entrant_count <= 0:
        raise ValueError("cannot pick a winner without entrants")
    if random_value < 0:
        raise ValueError("random value must be a uint256")
    return random_value % entrant_count


def upkeep_needed(
    state: RaffleState, elapsed: int, interval: int, entrant_count: int, balance: int
) -> bool:
    return (
        state == RaffleState.OPEN
        and elapsed >= interval
        and entrant_count > 0
        and balance > 0
    )
