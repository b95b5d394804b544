"""Keeps a front end's copy of the raffle address and ABI in sync.

The addresses file maps chain ids to every raffle deployed on that chain:

    {"31337": ["0x5FbDB2315678afecb367f032d93F642f64180aa3"]}
"""
import json
import os
from pathlib import Path


def front_end_addresses_file() -> Path:
    return Path(
        os.environ.get(
            "FRONT_END_ADDRESSES_FILE", "../raffle-frontend/constants/contractAddresses.json"
        )
    )


def front_end_abi_file() -> Path:
    return Path(os.environ.get("FRONT_END_ABI_FILE", "../raffle-frontend/constants/abi.json"))


def should_update_front_end() -> bool:
    return os.environ.get("UPDATE_FRONT_END", "").lower() in ("1", "true", "yes")


def update_contract_addresses(path, chain_id: int, address: str) -> dict:
    path = Path(path)
    if path.exists():
        current_addresses = json.loads(path.read_text(encoding="utf8") or "{}")
    else:
        current_addresses = {}

    key = str(chain_id)
    known = current_addresses.setdefault(key, [])
    if address not in known:
        known.append(address)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(current_addresses), encoding="utf8")
    return current_addresses


def update_abi(path, abi: list) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(abi), encoding="utf8")


def sync_front_end(chain_id: int, address: str, abi: list, addresses_file=None, abi_file=None):
    print("Updating front end...")
    update_contract_addresses(addresses_file or front_end_addresses_file(), chain_id, address)
    update_abi(abi_file or front_end_abi_file(), abi)
    print("Front end updated!")
    print("-------------------------------------------------------")
