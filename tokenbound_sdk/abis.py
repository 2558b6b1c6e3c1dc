"""
ABIs for the ERC-6551 registry and account contracts.
"""

ERC6551_REGISTRY_ABI = [
    {
        "anonymous": False,
        "inputs": [
            {"indexed": False, "internalType": "address", "name": "account", "type": "address"},
            {"indexed": False, "internalType": "address", "name": "implementation", "type": "address"},
            {"indexed": False, "internalType": "uint256", "name": "chainId", "type": "uint256"},
            {"indexed": False, "internalType": "address", "name": "tokenContract", "type": "address"},
            {"indexed": False, "internalType": "uint256", "name": "tokenId", "type": "uint256"},
            {"indexed": False, "internalType": "uint256", "name": "salt", "type": "uint256"}
        ],
        "name": "AccountCreated",
        "type": "event"
    },
    {
        "inputs": [],
        "name": "InitializationFailed",
        "type": "error"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "implementation", "type": "address"},
            {"internalType": "uint256", "name": "chainId", "type": "uint256"},
            {"internalType": "address", "name": "tokenContract", "type": "address"},
            {"internalType": "uint256", "name": "tokenId", "type": "uint256"},
            {"internalType": "uint256", "name": "salt", "type": "uint256"}
        ],
        "name": "account",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "implementation", "type": "address"},
            {"internalType": "uint256", "name": "chainId", "type": "uint256"},
            {"internalType": "address", "name": "tokenContract", "type": "address"},
            {"internalType": "uint256", "name": "tokenId", "type": "uint256"},
            {"internalType": "uint256", "name": "seed", "type": "uint256"},
            {"internalType": "bytes", "name": "initData", "type": "bytes"}
        ],
        "name": "createAccount",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "nonpayable",
        "type": "function"
    }
]

ERC6551_ACCOUNT_ABI = [
    {
        "inputs": [
            {"internalType": "address", "name": "to", "type": "address"},
            {"internalType": "uint256", "name": "value", "type": "uint256"},
            {"internalType": "bytes", "name": "data", "type": "bytes"}
        ],
        "name": "executeCall",
        "outputs": [{"internalType": "bytes", "name": "result", "type": "bytes"}],
        "stateMutability": "payable",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "initialize",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "nonce",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "owner",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "token",
        "outputs": [
            {"internalType": "uint256", "name": "chainId", "type": "uint256"},
            {"internalType": "address", "name": "tokenContract", "type": "address"},
            {"internalType": "uint256", "name": "tokenId", "type": "uint256"}
        ],
        "stateMutability": "view",
        "type": "function"
    }
]

# Function signatures used to build call data without a provider
CREATE_ACCOUNT_SIGNATURE = "createAccount(address,uint256,address,uint256,uint256,bytes)"
EXECUTE_CALL_SIGNATURE = "executeCall(address,uint256,bytes)"
INITIALIZE_SIGNATURE = "initialize()"
