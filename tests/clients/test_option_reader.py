import pytest

from contractlist.clients.option_reader import ContractFunctionOptions, OptionsSnapshot, OptionsState
from contractlist.types import AbiCallDescriptor

POOL = "0x5fbdb2315678afecb367f032d93f642f64180aa3"


# --- Fakes ------------------------------------------------------------------

class FakeFunction:
    def __init__(self, result, calls, name):
        self._result = result
        self._calls = calls
        self._name = name

    def __call__(self, *args):
        self._calls.append((self._name, args))
        return self

    def call(self):
        if isinstance(self._result, Exception):
            raise self._result
        return self._result


class FakeContract:
    def __init__(self, results, calls):
        self._results = results
        self._calls = calls

    def get_function_by_name(self, name):
        return FakeFunction(self._results[name], self._calls, name)


class FakeEth:
    def __init__(self, results):
        self.results = results
        self.calls = []
        self.addresses = []

    def contract(self, address, abi):
        self.addresses.append(address)
        return FakeContract(self.results, self.calls)


class FakeW3:
    def __init__(self, results):
        self.eth = FakeEth(results)


@pytest.fixture
def w3():
    return FakeW3({
        "getReserveTokens": ["0xaaa", "0xbbb"],
        "owner": POOL,
        "feeTiers": (500, 3000),
        "broken": RuntimeError("execution reverted"),
    })


@pytest.fixture
def reader(w3):
    return ContractFunctionOptions(w3=w3)


def form(values):
    return lambda field: values.get(field)


# --- Tests ------------------------------------------------------------------

def test_initial_state_is_idle(reader):
    assert reader.snapshot == OptionsSnapshot()
    assert reader.snapshot.state is OptionsState.IDLE


def test_list_result_becomes_options(reader, w3):
    snapshot = reader.load(
        {"function": "getReserveTokens", "contractFrom": "pool", "argsFrom": ["owner", {"literal": 2}]},
        form({"pool": POOL, "owner": "0xcafe"}),
    )
    assert snapshot.state is OptionsState.SUCCESS
    assert snapshot.options == [{"value": "0xaaa", "label": "0xaaa"}, {"value": "0xbbb", "label": "0xbbb"}]
    assert w3.eth.calls == [("getReserveTokens", ("0xcafe", 2))]
    assert reader.snapshot == snapshot


def test_tuple_result_becomes_options(reader):
    snapshot = reader.load({"function": "feeTiers", "contractFrom": {"literal": POOL}}, form({}))
    assert snapshot.options == [{"value": 500, "label": "500"}, {"value": 3000, "label": "3000"}]


def test_scalar_result_becomes_single_option(reader):
    call = AbiCallDescriptor(function="owner", contractFrom="pool")
    snapshot = reader.load(call, form({"pool": POOL}))
    assert snapshot.options == [{"value": POOL, "label": POOL}]


def test_missing_contract_yields_no_options(reader, w3):
    snapshot = reader.load({"function": "owner", "contractFrom": "pool"}, form({"pool": ""}))
    assert snapshot.state is OptionsState.SUCCESS
    assert snapshot.options == []
    assert w3.eth.addresses == []


def test_failed_read_sets_error(reader):
    snapshot = reader.load({"function": "broken", "contractFrom": "pool"}, form({"pool": POOL}))
    assert snapshot.state is OptionsState.ERROR
    assert snapshot.error == "execution reverted"
    assert snapshot.options == []


def test_invalid_contract_address_sets_error(reader):
    snapshot = reader.load({"function": "owner", "contractFrom": "pool"}, form({"pool": "nope"}))
    assert snapshot.state is OptionsState.ERROR
    assert "Invalid contract address" in snapshot.error


@pytest.mark.parametrize("abi_call,enabled", [(None, True), ({"function": "owner"}, False)])
def test_disabled_or_missing_descriptor_resets(reader, abi_call, enabled):
    reader.load({"function": "owner", "contractFrom": {"literal": POOL}}, form({}))
    snapshot = reader.load(abi_call, form({}), enabled=enabled)
    assert snapshot.state is OptionsState.IDLE
    assert snapshot.options == []


def test_superseded_read_is_discarded(reader):
    def resolve(field):
        # the form changes while the read is in flight
        reader.reset()
        return POOL

    snapshot = reader.load({"function": "getReserveTokens", "contractFrom": "pool"}, resolve)
    assert snapshot.state is OptionsState.IDLE
    assert reader.snapshot.options == []


def test_reset_after_success_returns_to_idle(reader):
    reader.load({"function": "owner", "contractFrom": {"literal": POOL}}, form({}))
    assert reader.reset().state is OptionsState.IDLE
    assert reader.snapshot.options == []
