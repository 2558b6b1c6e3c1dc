#!/usr/bin/env python3
"""
Example of using the TokenboundClient with a node-managed wallet (e.g. anvil).
"""
import os

from web3 import Web3

from tokenbound_sdk import TokenboundClient, fetch_account, is_account_deployed
from tokenbound_sdk.signer.node import NodeWalletClient


def main():
    """
    Deploy a token-bound account from the node's first unlocked account
    and check the local derivation against the registry.
    """
    RPC_URL = os.environ.get("RPC_URL", "http://127.0.0.1:8545")
    TOKEN_CONTRACT = os.environ.get("TOKEN_CONTRACT", "0xe7134a029cd2fd55f678d6809e64d0b6a0caddcb")
    TOKEN_ID = os.environ.get("TOKEN_ID", "9")

    w3 = Web3(Web3.HTTPProvider(RPC_URL))
    wallet_client = NodeWalletClient(w3)
    client = TokenboundClient(chain_id=w3.eth.chain_id, wallet_client=wallet_client)

    account = client.get_account(TOKEN_CONTRACT, TOKEN_ID)
    onchain = fetch_account(w3, TOKEN_CONTRACT, TOKEN_ID)
    print(f"Computed: {account}  Registry: {onchain}")

    if not is_account_deployed(w3, account):
        tx_hash = client.create_account(TOKEN_CONTRACT, TOKEN_ID)
        receipt = w3.eth.wait_for_transaction_receipt(tx_hash)
        print(f"Deployed in block {receipt['blockNumber']}")
    else:
        print("Account already deployed")


if __name__ == "__main__":
    main()
