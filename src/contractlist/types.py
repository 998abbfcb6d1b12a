"""Defines the core data structures and Pydantic models for contract lists.

This module contains the types used for representing raw ABI entries (the
input of generation) and contract-list documents (the output): factories,
function entries, arguments, argument groups, and the widget configuration
attached to each argument. Field names follow the JSON wire format, so a
model dump is directly a document fragment.
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

ValueType = Literal[
    "address", "address[]", "uint256", "uint256[]", "uint8", "bool", "string", "tuple", "tuple[]",
]

Widget = Literal[
    "address", "text", "select", "multiselect", "checkbox", "radio", "slider", "tokenAmount", "datetime",
]

OutputFormat = Literal["address", "link", "hex", "number"]


class ContractListModel(BaseModel):
    """Base model for every contract-list record.

    Unknown keys are kept so hand-authored documents survive a load/dump
    cycle untouched.
    """
    model_config = ConfigDict(extra="allow")

    def to_dict(self) -> Dict[str, Any]:
        """Dumps the model to its JSON wire form, dropping unset optionals."""
        return self.model_dump(mode="json", exclude_none=True)


# --- ABI input ----------------------------------------------------------------

class AbiParameter(ContractListModel):
    """A single input or output parameter of an ABI entry.

    Attributes:
        name: Parameter name; may be empty for unnamed parameters.
        type: Solidity ABI type string, e.g. "uint256", "address[]", "tuple".
        components: Member parameters, only for tuple and tuple[] types.
    """
    name: Optional[str] = None
    type: str
    components: Optional[List[AbiParameter]] = None
    indexed: Optional[bool] = None
    internalType: Optional[str] = None


class AbiFunction(ContractListModel):
    """One entry of a contract ABI.

    Only entries whose `type` is "function" take part in generation. Legacy
    ABIs may omit `stateMutability` and carry `constant`/`payable` instead.
    """
    name: Optional[str] = None
    type: Optional[str] = None
    inputs: List[AbiParameter] = []
    outputs: Optional[List[AbiParameter]] = None
    stateMutability: Optional[str] = None
    constant: Optional[bool] = None
    payable: Optional[bool] = None


# --- Argument sources -----------------------------------------------------------

class LiteralArg(ContractListModel):
    """A literal argument value, written as `{"literal": value}` on the wire."""
    literal: Any = None


class FieldArg(ContractListModel):
    """A reference to another form field, written as a bare string on the wire."""
    field: str


ArgSource = Union[str, LiteralArg]


class TokenlistLabelField(ContractListModel):
    """Resolves a display label by looking the value up in a token list."""
    tokenlistPath: str
    labelField: str


LabelField = Union[str, TokenlistLabelField]


# --- UI configuration -----------------------------------------------------------

class TokenAmountConfig(ContractListModel):
    tokenFrom: Optional[str] = None
    showMaxButton: Optional[bool] = None
    showUsdValue: Optional[bool] = None
    showBalance: Optional[bool] = None


class DatetimeConfig(ContractListModel):
    format: Optional[Literal["timestamp", "relative", "datetime", "date", "time"]] = None
    minDate: Optional[Literal["now", "custom"]] = None
    maxDate: Optional[str] = None
    defaultOffset: Optional[str] = None


class AbiCallDescriptor(ContractListModel):
    """Describes a read-only contract call whose result feeds the UI.

    Nothing in this package executes the call during generation or
    normalization; see `contractlist.clients.option_reader` for the optional
    resolver.

    Attributes:
        abiPath: Path to an ABI file holding `function`.
        inlineAbi: ABI fragment holding `function`, used instead of `abiPath`.
        function: Name of the function to call.
        argsFrom: Call arguments, each a form field name or a literal.
        contractFrom: Target contract, a form field name or a literal address.
    """
    abiPath: Optional[str] = None
    inlineAbi: Optional[List[Any]] = None
    function: str
    argsFrom: Optional[List[ArgSource]] = None
    contractFrom: Optional[ArgSource] = None


class HookDescriptor(ContractListModel):
    name: str
    argsFrom: Optional[List[ArgSource]] = None


class OnChainValidation(ContractListModel):
    """An asynchronous validation rule backed by a contract read.

    Attributes:
        abiCall: The read to perform.
        condition: How the read result is compared.
        value: Comparison operand for single-value conditions.
        values: Allowed results for the "in" condition.
        compareToField: Form field whose value is the comparison operand.
        errorMessage: Message shown when the check fails.
        debounceMs: Delay before re-running the check after an edit.
    """
    abiCall: AbiCallDescriptor
    condition: Literal["exists", "equals", "notEquals", "gt", "gte", "lt", "lte", "in"]
    value: Optional[Any] = None
    values: Optional[List[Any]] = None
    compareToField: Optional[str] = None
    errorMessage: str
    debounceMs: Optional[int] = None


class ValidationConfig(ContractListModel):
    regex: Optional[str] = None
    errorMessage: Optional[str] = None
    min: Optional[Union[int, float]] = None
    max: Optional[Union[int, float]] = None
    step: Optional[Union[int, float]] = None
    onChain: Optional[OnChainValidation] = None


class DisplayConfig(ContractListModel):
    unit: Optional[Literal["wei", "gwei", "ether", "bps", "percent", "seconds", "minutes", "hours", "days"]] = None
    unitLabel: Optional[str] = None
    decimals: Optional[int] = None


class LayoutHints(ContractListModel):
    colSpan: Optional[int] = None
    order: Optional[int] = None
    emphasis: Optional[Literal["normal", "prominent", "subtle"]] = None
    hidden: Optional[bool] = None
    readonly: Optional[bool] = None


class I18nConfig(ContractListModel):
    labelKey: Optional[str] = None
    descriptionKey: Optional[str] = None
    placeholderKey: Optional[str] = None
    helpTextKey: Optional[str] = None
    namespace: Optional[str] = None


class ArrayConfig(ContractListModel):
    addLabel: Optional[str] = None
    removeLabel: Optional[str] = None
    itemLabelField: Optional[str] = None


class VisibleWhen(ContractListModel):
    field: str
    condition: Literal["equals", "notEquals", "in", "notIn", "exists", "notExists"]
    value: Optional[Any] = None
    values: Optional[List[Any]] = None


class SelectOption(ContractListModel):
    value: Any = None
    label: str


class ArgumentUI(ContractListModel):
    """Rendering configuration of one argument.

    `widget` selects the input control; the sub-configs are only meaningful
    for the matching widget (e.g. `tokenAmountConfig` with "tokenAmount").
    The models do not enforce that pairing, the inference rules uphold it.
    """
    widget: Optional[Widget] = None
    tokenAmountConfig: Optional[TokenAmountConfig] = None
    datetimeConfig: Optional[DatetimeConfig] = None
    allowManual: Optional[bool] = None
    addressBook: Optional[bool] = None
    placeholder: Optional[str] = None
    helpText: Optional[str] = None
    helpLink: Optional[str] = None
    source: Optional[Literal["tokenlist", "contractlist", "static", "contractFunction"]] = None
    sourcePath: Optional[str] = None
    valueField: Optional[str] = None
    labelField: Optional[LabelField] = None
    filters: Optional[Dict[str, Any]] = None
    options: Optional[List[SelectOption]] = None
    dependsOn: Optional[List[str]] = None
    visibleWhen: Optional[VisibleWhen] = None
    hook: Optional[HookDescriptor] = None
    abiCall: Optional[AbiCallDescriptor] = None
    array: Optional[ArrayConfig] = None
    validation: Optional[ValidationConfig] = None
    display: Optional[DisplayConfig] = None
    layout: Optional[LayoutHints] = None
    i18n: Optional[I18nConfig] = None


# --- Arguments ------------------------------------------------------------------

class DynamicDefault(ContractListModel):
    source: Literal["connectedWallet", "field", "contractCall", "env"]
    field: Optional[str] = None
    envVar: Optional[str] = None
    abiCall: Optional[AbiCallDescriptor] = None


class ComputeSource(ContractListModel):
    type: Literal["abiCall", "expression", "field"]
    abiCall: Optional[AbiCallDescriptor] = None
    expression: Optional[str] = None
    field: Optional[str] = None
    transform: Optional[str] = None
    transformDecimals: Optional[int] = None


class Argument(ContractListModel):
    """A single form field of a function entry.

    Attributes:
        name: ABI parameter name.
        type: Normalized UI value type.
        description: Human-readable label.
        ui: Widget configuration; absent when the plain text widget suffices.
        components: Member fields of tuple and tuple[] arguments.
        minItems: Minimum number of items for array arguments.
        maxItems: Maximum number of items for array arguments.
        computed: Whether the value is derived instead of entered.
        computeFrom: How a computed value is derived.
        default: A literal default or a dynamic default source.
    """
    name: str
    type: ValueType
    description: str
    optional: Optional[bool] = None
    ui: Optional[ArgumentUI] = None
    components: Optional[List[Argument]] = None
    minItems: Optional[int] = None
    maxItems: Optional[int] = None
    computed: Optional[bool] = None
    computeFrom: Optional[ComputeSource] = None
    default: Optional[Union[DynamicDefault, bool, int, float, str, List[Any]]] = None


class ArgumentGroup(ContractListModel):
    """A presentational group of arguments.

    Grouping never changes which arguments a function takes or their order.
    """
    group: str
    collapsed: Optional[bool] = None
    description: Optional[str] = None
    fields: List[Argument]


class FlatArguments(BaseModel):
    """Arguments declared as a plain list."""
    items: List[Argument] = []

    def flatten(self) -> List[Argument]:
        return list(self.items)

    def as_groups(self) -> List[ArgumentGroup]:
        return [ArgumentGroup(group="Parameters", fields=list(self.items))]

    def to_wire(self) -> List[Dict[str, Any]]:
        return [arg.to_dict() for arg in self.items]


class GroupedArguments(BaseModel):
    """Arguments declared as a list of groups."""
    groups: List[ArgumentGroup] = []

    def flatten(self) -> List[Argument]:
        return [arg for group in self.groups for arg in group.fields]

    def as_groups(self) -> List[ArgumentGroup]:
        return list(self.groups)

    def to_wire(self) -> List[Dict[str, Any]]:
        return [group.to_dict() for group in self.groups]


ArgumentList = Union[FlatArguments, GroupedArguments]


# --- Function metadata ----------------------------------------------------------

class ResultStrategy(ContractListModel):
    """How to extract and display the result of a call.

    "simulate" reads the simulated return value, "event" decodes an emitted
    event argument, and "read" performs a follow-up contract read.
    """
    type: Literal["simulate", "event", "read"]
    label: Optional[str] = None
    format: Optional[OutputFormat] = None
    hook: Optional[HookDescriptor] = None
    name: Optional[str] = None
    arg: Optional[Union[str, int]] = None
    contractAddress: Optional[str] = None
    function: Optional[str] = None
    argsFrom: Optional[List[ArgSource]] = None
    valueField: Optional[str] = None
    abiPath: Optional[str] = None
    inlineAbi: Optional[List[Any]] = None


class WizardStep(ContractListModel):
    id: str
    title: str
    description: Optional[str] = None
    fields: Optional[List[str]] = None
    groups: Optional[List[str]] = None


class WizardConfig(ContractListModel):
    steps: List[WizardStep]
    showProgressBar: Optional[bool] = None
    showStepNumbers: Optional[bool] = None
    allowSkip: Optional[bool] = None


class WarningThresholds(ContractListModel):
    slippagePercent: Optional[float] = None
    priceImpactPercent: Optional[float] = None


class PreviewConfig(ContractListModel):
    enabled: Optional[bool] = None
    showTokenTransfers: Optional[bool] = None
    showStateChanges: Optional[bool] = None
    showApprovals: Optional[bool] = None
    simulateOnChain: Optional[bool] = None
    warningThresholds: Optional[WarningThresholds] = None


class GasEstimationConfig(ContractListModel):
    enabled: Optional[bool] = None
    showInNativeCurrency: Optional[bool] = None
    showInUsd: Optional[bool] = None
    showGasLimit: Optional[bool] = None
    refreshIntervalMs: Optional[int] = None
    includeApprovalGas: Optional[bool] = None


class FunctionEntry(BaseModel):
    """The in-memory form of one function entry.

    On the wire the function name is a dynamic key mapping to the label;
    `contractlist.document` encodes and decodes that shape.

    Attributes:
        functionName: The ABI function name.
        label: Display label.
        simulate: Whether the call is simulated before sending.
        resultStrategies: How to surface the call result.
        arguments: Flat or grouped argument list, if the function takes any.
        wizard: Multi-step form layout.
        preview: Transaction preview settings.
        gasEstimation: Gas estimate display settings.
    """
    functionName: str
    label: str
    simulate: Optional[bool] = None
    resultStrategies: Optional[List[ResultStrategy]] = None
    arguments: Optional[ArgumentList] = None
    wizard: Optional[WizardConfig] = None
    preview: Optional[PreviewConfig] = None
    gasEstimation: Optional[GasEstimationConfig] = None


class FactoryFunction(BaseModel):
    """A decoded function entry ready for rendering, with arguments flattened."""
    functionName: str
    label: str
    args: List[Argument] = []


# --- Factories ------------------------------------------------------------------

class TargetAddressValidation(ContractListModel):
    checkIsContract: Optional[bool] = None
    checkInterface: Optional[bool] = None
    interfaceId: Optional[str] = None


class TargetAddressConfig(ContractListModel):
    """Binds a factory's contract address to a form field.

    Attributes:
        field: Name of the form field holding the address.
        renderPhase: Whether the field is rendered before the functions
            ("first") or alongside the arguments ("inline").
        validation: Checks to run against the entered address.
    """
    field: str
    renderPhase: Optional[Literal["first", "inline"]] = None
    validation: Optional[TargetAddressValidation] = None


class Factory(ContractListModel):
    """One contract-interaction surface of a contract-list document.

    The contract address is either hardcoded (`address`), taken from a form
    field (`targetAddressArg`), or both; `resolve_target_address` decides
    which one is used.
    """
    name: str
    chainId: Optional[int] = None
    supportedChains: Optional[List[int]] = None
    hookName: Optional[str] = None
    address: Optional[str] = None
    targetAddressArg: Optional[Union[str, TargetAddressConfig]] = None
    functions: List[FunctionEntry] = []


Argument.model_rebuild()
AbiParameter.model_rebuild()
