import json

from contractlist import (
    ContractListError,
    GenerateOptions,
    build_options_from_ui,
    create_token_getters,
    decode_document,
    generate_contract_list,
    get_factories,
    get_factory_functions,
    load_abi,
    validate_contract_list,
)

VAULT_ABI = [
    {
        "type": "function",
        "name": "deposit",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "token", "type": "address"},
            {"name": "amount", "type": "uint256"},
            {"name": "receiver", "type": "address"},
        ],
    },
    {
        "type": "function",
        "name": "withdraw",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "shares", "type": "uint256"},
            {"name": "max_slippage_bps", "type": "uint16"},
            {"name": "deadline", "type": "uint64"},
        ],
    },
    {
        "type": "function",
        "name": "totalAssets",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256"}],
    },
]

SEPOLIA_TOKENS = [
    {"address": "0x1c7D4B196Cb0C7B01d743Fbc6116a902379C7238", "symbol": "USDC", "chainId": 11155111},
    {"address": "0xfFf9976782d46CC05630D1f6eBAb18b2324d6B14", "symbol": "WETH", "chainId": 11155111},
]


def main():
    # ==========================================================================
    # 1. Generate a contract list from the ABI
    # ==========================================================================
    print("Step 1: generating contract list...")
    try:
        document = generate_contract_list(GenerateOptions(
            abi=load_abi(VAULT_ABI),
            chainId=11155111,
            name="Demo Vault",
        ))
    except ContractListError as e:
        print(f"Generation failed: {e}")
        return
    print(json.dumps(document, indent=2))

    # ==========================================================================
    # 2. Validate it against the schema
    # ==========================================================================
    print("\nStep 2: validating...")
    result = validate_contract_list(document)
    if not result.valid:
        for issue in result.errors:
            print(f"  {issue.path}: {issue.message}")
        return
    print("Validation OK")

    # ==========================================================================
    # 3. Read it back the way a renderer would
    # ==========================================================================
    print("\nStep 3: listing functions on Sepolia...")
    for factory in get_factories(decode_document(document), 11155111):
        for fn in get_factory_functions(factory):
            widgets = ", ".join(f"{a.name}={a.ui.widget if a.ui else 'text'}" for a in fn.args)
            print(f"  {factory.name}.{fn.functionName} ({fn.label}): {widgets}")

    # ==========================================================================
    # 4. Build token options for a select widget
    # ==========================================================================
    print("\nStep 4: token options...")
    getters = create_token_getters({"sepolia-tokens.tokenlist.json": SEPOLIA_TOKENS})
    ui = {"widget": "select", "source": "tokenlist", "sourcePath": "sepolia-tokens.tokenlist.json"}
    for option in build_options_from_ui(ui, getters):
        print(f"  {option['label']}: {option['value']}")


if __name__ == "__main__":
    main()
