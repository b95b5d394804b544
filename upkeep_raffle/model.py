"""Pure Python model of the raffle lifecycle.

``RaffleModel`` follows the same rules as ``src/raffle.vy`` without a chain,
and ``CoordinatorModel`` plays the VRF coordinator as a table of pending
requests keyed by request id. The fuzz suite runs both next to the deployed
contracts and checks that they agree.
"""
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from eth_abi import encode
from eth_utils import keccak

from upkeep_raffle.config import RaffleConfig
from upkeep_raffle.errors import (
    InsufficientPayment,
    NotOpen,
    PayoutTransferFailed,
    UnknownRequest,
    UpkeepNotNeeded,
)
from upkeep_raffle.state import RaffleState, select_winner, upkeep_needed


def mock_random_words(request_id: int, num_words: int) -> List[int]:
    """The words the VRF coordinator mock delivers when none are supplied."""
    return [
        int.from_bytes(keccak(encode(["uint256", "uint256"], [request_id, i])), "big")
        for i in range(num_words)
    ]


@dataclass
class PendingRequest:
    request_id: int
    consumer: "RaffleModel"
    key_hash: bytes
    sub_id: int
    callback_gas_limit: int
    num_words: int


@dataclass(frozen=True)
class Event:
    name: str
    args: dict = field(default_factory=dict)


class CoordinatorModel:
    def __init__(self):
        self._next_request_id = 1
        self.pending: Dict[int, PendingRequest] = {}

    @property
    def last_request_id(self) -> int:
        return self._next_request_id - 1

    def request_random_words(
        self, consumer, key_hash: bytes, sub_id: int, callback_gas_limit: int, num_words: int
    ) -> int:
        request_id = self._next_request_id
        self._next_request_id += 1
        self.pending[request_id] = PendingRequest(
            request_id, consumer, key_hash, sub_id, callback_gas_limit, num_words
        )
        return request_id

    def fulfill_random_words(
        self, request_id: int, now: int, random_words: Optional[List[int]] = None
    ) -> str:
        """Settle a pending request and hand the words to its consumer.

        The request is dropped before the callback runs, so a consumer that
        fails leaves it settled all the same.
        """
        request = self.pending.pop(request_id, None)
        if request is None:
            raise UnknownRequest(request_id)
        if random_words is None:
            random_words = mock_random_words(request_id, request.num_words)
        return request.consumer.fulfill_random_words(request_id, random_words, now)


class RaffleModel:
    REQUEST_CONFIRMATIONS = 3
    NUM_WORDS = 1

    def __init__(
        self,
        config: RaffleConfig,
        coordinator: CoordinatorModel,
        deployed_at: int,
        payout: Optional[Callable[[str, int], bool]] = None,
    ):
        self.config = config
        self.coordinator = coordinator
        self.payout = payout or (lambda winner, amount: True)

        self.state = RaffleState.OPEN
        self.players: List[str] = []
        self.balance = 0
        self.last_timestamp = deployed_at
        self.recent_winner: Optional[str] = None
        self.pending_request_id: Optional[int] = None
        self.events: List[Event] = []

    def enter(self, player: str, value: int) -> None:
        if value < self.config.entrance_fee:
            raise InsufficientPayment(value, self.config.entrance_fee)
        if self.state != RaffleState.OPEN:
            raise NotOpen()
        self.players.append(player)
        self.balance += value
        self.events.append(Event("RaffleEnter", {"player": player}))

    def check_upkeep(self, now: int) -> bool:
        return upkeep_needed(
            self.state,
            now - self.last_timestamp,
            self.config.interval,
            len(self.players),
            self.balance,
        )

    def perform_upkeep(self, now: int) -> int:
        if not self.check_upkeep(now):
            raise UpkeepNotNeeded(self.balance, len(self.players), int(self.state))
        request_id = self.coordinator.request_random_words(
            self,
            self.config.gas_lane,
            self.config.subscription_id,
            self.config.callback_gas_limit,
            self.NUM_WORDS,
        )
        self.state = RaffleState.CALCULATING
        self.pending_request_id = request_id
        self.events.append(Event("RequestedRaffleWinner", {"requestId": request_id}))
        return request_id

    def fulfill_random_words(self, request_id: int, random_words: List[int], now: int) -> str:
        if self.state != RaffleState.CALCULATING or request_id != self.pending_request_id:
            raise UnknownRequest(request_id)
        if not random_words:
            raise ValueError("no random words delivered")

        winner = self.players[select_winner(random_words[0], len(self.players))]
        prize = self.balance
        # nothing is mutated until the payout went through
        if not self.payout(winner, prize):
            raise PayoutTransferFailed(winner, prize)

        self.recent_winner = winner
        self.players = []
        self.balance = 0
        self.state = RaffleState.OPEN
        self.last_timestamp = now
        self.pending_request_id = None
        self.events.append(Event("WinnerPicked", {"winner": winner}))
        return winner
