"""
CircuitBreakerAMM pool ABI.

Swaps are keyed by token order (token0 / token1); quotes return
``(amount, feeBps, feeAmount)``.
"""

from .factory import _BREAKER_PARAMS_COMPONENTS

_QUOTE_OUTPUTS = [
    {"internalType": "uint256", "name": "amount", "type": "uint256"},
    {"internalType": "uint256", "name": "feeBps", "type": "uint256"},
    {"internalType": "uint256", "name": "feeAmount", "type": "uint256"},
]

CIRCUIT_BREAKER_AMM_ABI = [
    # Views
    {"inputs": [], "name": "token0", "outputs": [{"internalType": "address", "name": "", "type": "address"}], "stateMutability": "view", "type": "function"},
    {"inputs": [], "name": "token1", "outputs": [{"internalType": "address", "name": "", "type": "address"}], "stateMutability": "view", "type": "function"},
    {"inputs": [], "name": "getReserves", "outputs": [{"internalType": "uint112", "name": "reserve0", "type": "uint112"}, {"internalType": "uint112", "name": "reserve1", "type": "uint112"}], "stateMutability": "view", "type": "function"},
    {"inputs": [], "name": "currentRV", "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}], "stateMutability": "view", "type": "function"},
    {"inputs": [], "name": "paused", "outputs": [{"internalType": "bool", "name": "", "type": "bool"}], "stateMutability": "view", "type": "function"},
    {"inputs": [{"internalType": "uint256", "name": "amountIn", "type": "uint256"}, {"internalType": "bool", "name": "zeroForOne", "type": "bool"}], "name": "quoteOut", "outputs": _QUOTE_OUTPUTS, "stateMutability": "view", "type": "function"},
    {"inputs": [{"internalType": "uint256", "name": "amountOut", "type": "uint256"}, {"internalType": "bool", "name": "zeroForOne", "type": "bool"}], "name": "quoteIn", "outputs": _QUOTE_OUTPUTS, "stateMutability": "view", "type": "function"},
    # Swaps
    {"inputs": [{"internalType": "uint256", "name": "amountIn", "type": "uint256"}, {"internalType": "uint256", "name": "amountOutMin", "type": "uint256"}], "name": "swapExactToken0ForToken1", "outputs": [{"internalType": "uint256", "name": "amountOut", "type": "uint256"}], "stateMutability": "nonpayable", "type": "function"},
    {"inputs": [{"internalType": "uint256", "name": "amountIn", "type": "uint256"}, {"internalType": "uint256", "name": "amountOutMin", "type": "uint256"}], "name": "swapExactToken1ForToken0", "outputs": [{"internalType": "uint256", "name": "amountOut", "type": "uint256"}], "stateMutability": "nonpayable", "type": "function"},
    # Role-gated admin
    {"inputs": [{"internalType": "address", "name": "to", "type": "address"}], "name": "flushFees", "outputs": [], "stateMutability": "nonpayable", "type": "function"},
    {"inputs": [{"internalType": "address payable", "name": "to", "type": "address"}], "name": "flushNative", "outputs": [], "stateMutability": "nonpayable", "type": "function"},
    {"inputs": [], "name": "pause", "outputs": [], "stateMutability": "nonpayable", "type": "function"},
    {"inputs": [], "name": "unpause", "outputs": [], "stateMutability": "nonpayable", "type": "function"},
    {"inputs": [{"components": _BREAKER_PARAMS_COMPONENTS, "internalType": "struct CircuitBreakerAMM.Params", "name": "p", "type": "tuple"}], "name": "updateParams", "outputs": [], "stateMutability": "nonpayable", "type": "function"},
    # Events
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "address", "name": "sender", "type": "address"},
            {"indexed": False, "internalType": "bool", "name": "zeroForOne", "type": "bool"},
            {"indexed": False, "internalType": "uint256", "name": "amountIn", "type": "uint256"},
            {"indexed": False, "internalType": "uint256", "name": "amountOut", "type": "uint256"},
        ],
        "name": "Swap",
        "type": "event",
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "address", "name": "to", "type": "address"},
            {"indexed": False, "internalType": "uint256", "name": "amount0", "type": "uint256"},
            {"indexed": False, "internalType": "uint256", "name": "amount1", "type": "uint256"},
        ],
        "name": "FeesFlushed",
        "type": "event",
    },
]
