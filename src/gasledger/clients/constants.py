"""Contract interfaces queried during scanning."""

GAS_PRICE_ORACLE_ABI = [
    {
        "inputs": [{"internalType": "bytes", "name": "_data", "type": "bytes"}],
        "name": "getL1Fee",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
]

# EtherRouter-style upgradeable proxies resolve implementations per selector
ETHER_ROUTER_ABI = [
    {
        "inputs": [{"internalType": "bytes4", "name": "sig", "type": "bytes4"}],
        "name": "lookup",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
]

ZERO_ADDRESS = "0x" + "0" * 40
