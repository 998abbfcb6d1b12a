"""Resolves `abiCall` option descriptors with a contract read.

Documents only describe these reads; resolving them is an optional
convenience for consumers that render option lists from live chain data.
"""
from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict
from web3 import Web3

from contractlist.clients.base_client import BaseClient
from contractlist.options import normalize_arg_source
from contractlist.types import AbiCallDescriptor, ArgSource, FieldArg

logger = logging.getLogger(__name__)


class OptionsState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class OptionsSnapshot(BaseModel):
    """The observable state of an option read.

    Attributes:
        state: Where the read stands.
        options: The `{value, label}` options, set on success.
        error: The failure message, set on error.
    """
    model_config = ConfigDict(frozen=True)

    state: OptionsState = OptionsState.IDLE
    options: List[Dict[str, Any]] = []
    error: Optional[str] = None


class ContractFunctionOptions(BaseClient):
    """Turns an `abiCall` descriptor into select options.

    Each `load` is tagged with a generation number. Calling `reset` (because
    the descriptor or the form values it depends on changed) or starting a
    new `load` invalidates the read in flight: its result is discarded when it
    arrives, so only the latest read ever becomes visible.
    """

    def __init__(
        self,
        *,
        rpc_endpoint: Optional[str] = None,
        w3: Optional[Web3] = None,
        timeout: int = 30,
    ) -> None:
        super().__init__(rpc_endpoint=rpc_endpoint, w3=w3, timeout=timeout)
        self._lock = threading.Lock()
        self._generation = 0
        self._snapshot = OptionsSnapshot()

    @property
    def snapshot(self) -> OptionsSnapshot:
        with self._lock:
            return self._snapshot

    def reset(self) -> OptionsSnapshot:
        """Cancels any read in flight and returns to the idle state."""
        with self._lock:
            self._generation += 1
            self._snapshot = OptionsSnapshot()
            return self._snapshot

    def load(
        self,
        abi_call: Union[AbiCallDescriptor, Mapping[str, Any], None],
        resolve_arg: Callable[[str], Any],
        enabled: bool = True,
    ) -> OptionsSnapshot:
        """
        Read the options described by an `abiCall` descriptor.

        Args:
            abi_call: The descriptor; None resets to idle.
            resolve_arg: Maps a form field name to its current value.
            enabled: When False, resets to idle without reading.

        Returns:
            The snapshot after the read. When the read was superseded while in
            flight, the current snapshot is returned unchanged.
        """
        if abi_call is None or not enabled:
            return self.reset()

        with self._lock:
            self._generation += 1
            token = self._generation
            self._snapshot = OptionsSnapshot(state=OptionsState.LOADING)

        try:
            options = self._read(abi_call, resolve_arg)
        except Exception as e:
            logger.debug("abiCall read failed: %s", e)
            return self._settle(token, OptionsSnapshot(state=OptionsState.ERROR, error=str(e)))
        return self._settle(token, OptionsSnapshot(state=OptionsState.SUCCESS, options=options))

    def _settle(self, token: int, snapshot: OptionsSnapshot) -> OptionsSnapshot:
        with self._lock:
            if token != self._generation:
                logger.debug("Discarding stale abiCall result")
                return self._snapshot
            self._snapshot = snapshot
            return snapshot

    @staticmethod
    def _resolve_source(source: ArgSource, resolve_arg: Callable[[str], Any]) -> Any:
        ref = normalize_arg_source(source)
        if isinstance(ref, FieldArg):
            return resolve_arg(ref.field)
        return ref.literal

    def _read(
        self,
        abi_call: Union[AbiCallDescriptor, Mapping[str, Any]],
        resolve_arg: Callable[[str], Any],
    ) -> List[Dict[str, Any]]:
        call = abi_call if isinstance(abi_call, AbiCallDescriptor) else AbiCallDescriptor.model_validate(abi_call)

        contract_address = None
        if call.contractFrom is not None:
            contract_address = self._resolve_source(call.contractFrom, resolve_arg)
        args = [self._resolve_source(source, resolve_arg) for source in call.argsFrom or []]
        if not contract_address:
            return []

        contract = self._load_contract(contract_address, call.inlineAbi or [])
        data = contract.get_function_by_name(call.function)(*args).call()
        if isinstance(data, (list, tuple)):
            return [{"value": value, "label": str(value)} for value in data]
        return [{"value": data, "label": str(data)}]
