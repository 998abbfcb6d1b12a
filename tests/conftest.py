# tests/conftest.py
import pytest


@pytest.fixture
def router_abi():
    """A small DEX-router-like ABI covering every ABI entry kind."""
    return [
        {"type": "constructor", "inputs": [{"name": "factory", "type": "address"}], "stateMutability": "nonpayable"},
        {
            "type": "function",
            "name": "swapExactTokensForTokens",
            "stateMutability": "nonpayable",
            "inputs": [
                {"name": "amountIn", "type": "uint256"},
                {"name": "amountOutMin", "type": "uint256"},
                {"name": "path", "type": "address[]"},
                {"name": "to", "type": "address"},
                {"name": "deadline", "type": "uint256"},
            ],
            "outputs": [{"name": "amounts", "type": "uint256[]"}],
        },
        {
            "type": "function",
            "name": "depositETH",
            "stateMutability": "payable",
            "inputs": [],
            "outputs": [],
        },
        {
            "type": "function",
            "name": "getAmountsOut",
            "stateMutability": "view",
            "inputs": [{"name": "amountIn", "type": "uint256"}, {"name": "path", "type": "address[]"}],
            "outputs": [{"name": "amounts", "type": "uint256[]"}],
        },
        {
            "type": "function",
            "name": "quote",
            "stateMutability": "pure",
            "inputs": [{"name": "amountA", "type": "uint256"}],
            "outputs": [{"name": "amountB", "type": "uint256"}],
        },
        {
            "type": "event",
            "name": "Swap",
            "inputs": [{"name": "sender", "type": "address", "indexed": True}],
        },
        {"type": "receive", "stateMutability": "payable"},
    ]


@pytest.fixture
def grouped_arguments():
    return [
        {"group": "Basic", "fields": [{"name": "token", "type": "address", "description": "Token"}]},
        {
            "group": "Advanced",
            "collapsed": True,
            "fields": [
                {"name": "slippage", "type": "uint256", "description": "Slippage"},
                {"name": "deadline", "type": "uint256", "description": "Deadline"},
            ],
        },
    ]


@pytest.fixture
def flat_arguments():
    return [
        {"name": "token", "type": "address", "description": "Token"},
        {"name": "amount", "type": "uint256", "description": "Amount"},
    ]
