import os

from moccasin.config import get_active_network

from src import raffle
from upkeep_raffle.config import get_network_config
from upkeep_raffle.frontend import sync_front_end


def update_front_end(raffle_contract, chain_id: int) -> None:
    sync_front_end(chain_id, str(raffle_contract.address), raffle_contract.abi)


def moccasin_main() -> None:
    address = os.environ.get("RAFFLE_ADDRESS")
    if not address:
        raise ValueError("RAFFLE_ADDRESS is not set")
    network_config = get_network_config(get_active_network().name)
    update_front_end(raffle.at(address), network_config.chain_id)
