import pytest

from contractlist.errors import SchemaValidationError
from contractlist.validator import assert_valid, load_schema, validate_contract_list

VAULT = "0x1234567890123456789012345678901234567890"


@pytest.fixture
def valid_document():
    return [{
        "name": "Test Vault",
        "chainId": 1,
        "address": VAULT,
        "targetAddressArg": {"field": "vault", "renderPhase": "first", "validation": {"interfaceId": "0x01ffc9a7"}},
        "functions": [
            {
                "deposit": "Deposit",
                "simulate": True,
                "arguments": [
                    {
                        "name": "token",
                        "type": "address",
                        "description": "Token",
                        "ui": {
                            "widget": "select",
                            "source": "tokenlist",
                            "sourcePath": "sepolia-tokens.tokenlist.json",
                            "labelField": {"tokenlistPath": "sepolia-tokens.tokenlist.json", "labelField": "symbol"},
                        },
                    },
                    {
                        "name": "amount",
                        "type": "uint256",
                        "description": "Amount",
                        "ui": {"widget": "tokenAmount", "tokenAmountConfig": {"tokenFrom": "token"}},
                        "default": {"source": "field", "field": "balance"},
                    },
                ],
                "resultStrategies": [{"type": "simulate", "label": "Shares", "format": "number"}],
            },
            {
                "rebalance": "Rebalance",
                "arguments": [
                    {"group": "Basic", "fields": [{"name": "pool", "type": "address", "description": "Pool"}]},
                    {
                        "group": "Advanced",
                        "collapsed": True,
                        "fields": [{
                            "name": "slippage",
                            "type": "uint256",
                            "description": "Slippage",
                            "ui": {"widget": "slider", "validation": {"min": 0, "max": 1000, "step": 1}},
                        }],
                    },
                ],
                "wizard": {"steps": [{"id": "basic", "title": "Basic", "groups": ["Basic"]}]},
                "gasEstimation": {"enabled": True},
            },
        ],
    }]


def test_schema_loads():
    schema = load_schema()
    assert schema["type"] == "array"
    assert "factory" in schema["$defs"]


def test_valid_document(valid_document):
    result = validate_contract_list(valid_document)
    assert result.valid
    assert result.errors == []
    assert_valid(valid_document)


def test_empty_document_is_valid():
    assert validate_contract_list([]).valid


def test_minimal_factory_is_valid():
    assert validate_contract_list([{"name": "Vault", "functions": []}]).valid


def test_document_must_be_array():
    result = validate_contract_list({"name": "Vault", "functions": []})
    assert not result.valid
    assert result.errors[0].path == "$"


def test_missing_functions(valid_document):
    del valid_document[0]["functions"]
    result = validate_contract_list(valid_document)
    assert not result.valid
    assert result.errors[0].path == "$[0]"
    assert "functions" in result.errors[0].message


def test_bad_address(valid_document):
    valid_document[0]["address"] = "0x123"
    result = validate_contract_list(valid_document)
    assert [e.path for e in result.errors] == ["$[0].address"]


def test_non_string_label(valid_document):
    valid_document[0]["functions"][0]["deposit"] = 7
    result = validate_contract_list(valid_document)
    assert not result.valid
    assert any(e.path == "$[0].functions[0].deposit" for e in result.errors)


def test_unknown_argument_type(valid_document):
    valid_document[0]["functions"][0]["arguments"][1]["type"] = "int128"
    assert not validate_contract_list(valid_document).valid


def test_unknown_widget(valid_document):
    valid_document[0]["functions"][0]["arguments"][0]["ui"]["widget"] = "colorPicker"
    assert not validate_contract_list(valid_document).valid


def test_errors_are_collected_and_sorted(valid_document):
    valid_document[0]["chainId"] = 0
    valid_document[0]["address"] = "vault"
    result = validate_contract_list(valid_document)
    assert [e.path for e in result.errors] == ["$[0].address", "$[0].chainId"]


def test_assert_valid_raises(valid_document):
    valid_document[0]["address"] = "vault"
    with pytest.raises(SchemaValidationError) as exc:
        assert_valid(valid_document)
    assert len(exc.value.errors) == 1
    assert exc.value.errors[0].path == "$[0].address"
