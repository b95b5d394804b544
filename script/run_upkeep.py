"""Play Chainlink Keepers and VRF against a raffle on a development chain."""
import os

from moccasin.config import get_active_network

from src import raffle
from src.mocks import vrf_coordinator_v2_mock
from upkeep_raffle.config import DEVELOPMENT_CHAINS


def run_upkeep(raffle_contract, vrf_coordinator):
    upkeep_needed, _ = raffle_contract.checkUpkeep(b"")
    if not upkeep_needed:
        print("No upkeep needed")
        return None

    raffle_contract.performUpkeep(b"")
    request_id = raffle_contract.get_pending_request_id()
    print(f"Performed upkeep with RequestId: {request_id}")

    vrf_coordinator.fulfillRandomWords(request_id, raffle_contract.address)
    print("Responded!")
    winner = raffle_contract.get_recent_winner()
    print(f"The winner is: {winner}")
    return winner


def moccasin_main():
    active_network = get_active_network()
    if active_network.name not in DEVELOPMENT_CHAINS:
        raise ValueError(f"run_upkeep only works on development chains, not {active_network.name}")
    address = os.environ.get("RAFFLE_ADDRESS")
    if not address:
        raise ValueError("RAFFLE_ADDRESS is not set")
    raffle_contract = raffle.at(address)
    vrf_coordinator = vrf_coordinator_v2_mock.at(raffle_contract.get_vrf_coordinator())
    return run_upkeep(raffle_contract, vrf_coordinator)
