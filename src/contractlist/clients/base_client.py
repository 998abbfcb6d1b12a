from typing import Any, List, Optional

from web3 import Web3, HTTPProvider
from web3.contract.contract import Contract
from web3.types import ChecksumAddress

from contractlist.errors import InvalidParameterError


class BaseClient:
    """Common functionality for on-chain readers: Web3 connection and contract loading."""

    def __init__(
        self,
        *,
        rpc_endpoint: Optional[str] = None,
        w3: Optional[Web3] = None,
        timeout: int = 30,
    ) -> None:
        """
        Initialize the BaseClient.

        Args:
            rpc_endpoint: JSON-RPC URL for an Ethereum node.
            w3: An already configured Web3 instance, used instead of `rpc_endpoint`.
            timeout: HTTP request timeout in seconds.

        Raises:
            ValueError: If neither rpc_endpoint nor w3 is given.
        """
        if w3 is None and not rpc_endpoint:
            raise ValueError("rpc_endpoint must be provided")

        self._w3 = w3 if w3 is not None else Web3(HTTPProvider(rpc_endpoint, request_kwargs={"timeout": timeout}))

    def _load_contract(self, address: str, abi: List[Any]) -> Contract:
        """
        Validate and checksum an address, then bind a Web3.py Contract to it.

        Args:
            address: Hex string of the contract address.
            abi: ABI fragment describing the functions to call.

        Returns:
            A Web3.py Contract instance.

        Raises:
            InvalidParameterError: If the address is not a valid Ethereum address.
        """
        if not isinstance(address, str) or not Web3.is_address(address):
            raise InvalidParameterError(f"Invalid contract address: {address}")
        checksum_addr: ChecksumAddress = Web3.to_checksum_address(address)
        return self._w3.eth.contract(address=checksum_addr, abi=abi)
