class RaffleError(Exception):
    """Base class for raffle failures.

    ``reason`` is the revert string the Raffle contract uses for the same
    failure, so tests can match on-chain reverts against these classes.
    """

    reason = "RaffleError"


class InsufficientPayment(RaffleError):
    reason = "InsufficientPayment"

    def __init__(self, value: int, entrance_fee: int):
        super().__init__(f"sent {value} wei, entrance fee is {entrance_fee} wei")
        self.value = value
        self.entrance_fee = entrance_fee


class NotOpen(RaffleError):
    reason = "NotOpen"

    def __init__(self):
        super().__init__("raffle is calculating a winner")


class UpkeepNotNeeded(RaffleError):
    reason = "UpkeepNotNeeded"

    def __init__(self, balance: int, players: int, state: int):
        super().__init__(f"balance={balance} players={players} state={state}")
        self.balance = balance
        self.players = players
        self.state = state


class UnknownRequest(RaffleError):
    reason = "UnknownRequest"

    def __init__(self, request_id: int):
        super().__init__(f"no outstanding randomness request {request_id}")
        self.request_id = request_id


class PayoutTransferFailed(RaffleError):
    reason = "PayoutTransferFailed"

    def __init__(self, winner: str, amount: int):
        super().__init__(f"could not send {amount} wei to {winner}")
        self.winner = winner
        self.amount = amount
