"""
AMM factory ABI.

Covers pool creation/lookup, the defaults applied to newly cloned pools
and the clone implementation switch.
"""

_BREAKER_PARAMS_COMPONENTS = [
    {"internalType": "uint16", "name": "baseFeeBps", "type": "uint16"},
    {"internalType": "uint16", "name": "feeAlphaBps", "type": "uint16"},
    {"internalType": "uint16", "name": "lvl1Bps", "type": "uint16"},
    {"internalType": "uint16", "name": "lvl2Bps", "type": "uint16"},
    {"internalType": "uint16", "name": "lvl3Bps", "type": "uint16"},
    {"internalType": "uint16", "name": "maxTxBps", "type": "uint16"},
]

AMM_FACTORY_ABI = [
    {"inputs": [{"internalType": "address", "name": "tokenA", "type": "address"}, {"internalType": "address", "name": "tokenB", "type": "address"}], "name": "createPool", "outputs": [{"internalType": "address", "name": "pool", "type": "address"}], "stateMutability": "nonpayable", "type": "function"},
    {"inputs": [{"internalType": "address", "name": "tokenA", "type": "address"}, {"internalType": "address", "name": "tokenB", "type": "address"}], "name": "getPool", "outputs": [{"internalType": "address", "name": "", "type": "address"}], "stateMutability": "view", "type": "function"},
    {"inputs": [{"components": _BREAKER_PARAMS_COMPONENTS, "internalType": "struct AMMFactory.Defaults", "name": "d", "type": "tuple"}], "name": "setDefaults", "outputs": [], "stateMutability": "nonpayable", "type": "function"},
    {"inputs": [{"internalType": "address", "name": "newImpl", "type": "address"}], "name": "upgradeImplementation", "outputs": [], "stateMutability": "nonpayable", "type": "function"},
    {"inputs": [], "name": "implementation", "outputs": [{"internalType": "address", "name": "", "type": "address"}], "stateMutability": "view", "type": "function"},
    {"inputs": [], "name": "allPoolsLength", "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}], "stateMutability": "view", "type": "function"},
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "address", "name": "token0", "type": "address"},
            {"indexed": True, "internalType": "address", "name": "token1", "type": "address"},
            {"indexed": False, "internalType": "address", "name": "pool", "type": "address"},
        ],
        "name": "PoolCreated",
        "type": "event",
    },
    {
        "anonymous": False,
        "inputs": [{"indexed": True, "internalType": "address", "name": "newImpl", "type": "address"}],
        "name": "ImplementationUpgraded",
        "type": "event",
    },
]
