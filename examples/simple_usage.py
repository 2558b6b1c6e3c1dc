#!/usr/bin/env python3
"""
Simple example of using the Tokenbound SDK.
"""
import os

from tokenbound_sdk import TokenboundClient
from tokenbound_sdk.signer.local import LocalSigner


def main():
    """
    Demonstrate basic usage of the TokenboundClient.

    This example shows how to:
    1. Compute the token-bound account address of an NFT
    2. Prepare the transaction that deploys it
    3. Deploy it and send ETH out of it when a private key is configured
    """
    # Read configuration from environment
    RPC_URL = os.environ.get("RPC_URL", "https://sepolia.drpc.org")
    CHAIN_ID = int(os.environ.get("CHAIN_ID", "11155111"))
    PRIVATE_KEY = os.environ.get("PRIVATE_KEY")
    TOKEN_CONTRACT = os.environ.get("TOKEN_CONTRACT", "0xe7134a029cd2fd55f678d6809e64d0b6a0caddcb")
    TOKEN_ID = os.environ.get("TOKEN_ID", "9")

    signer = LocalSigner(PRIVATE_KEY, rpc_url=RPC_URL) if PRIVATE_KEY else None
    client = TokenboundClient(chain_id=CHAIN_ID, signer=signer)

    account = client.get_account(TOKEN_CONTRACT, TOKEN_ID)
    print(f"Token-bound account: {account}")

    prepared = client.prepare_create_account(TOKEN_CONTRACT, TOKEN_ID)
    print(f"createAccount transaction: {prepared.to_tx_dict()}")

    if not signer:
        print("PRIVATE_KEY not set, skipping submission")
        return

    tx_hash = client.create_account(TOKEN_CONTRACT, TOKEN_ID)
    print(f"Account creation sent: {tx_hash}")

    # Send 0.001 ETH from the account back to the signer
    tx_hash = client.execute_call(account, signer.address, 10**15, "0x")
    print(f"executeCall sent: {tx_hash}")


if __name__ == "__main__":
    main()
