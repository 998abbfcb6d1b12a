"""
Command-line interface for contract lists.

Provides `generate` (ABI file -> contract-list JSON) and `validate`
(contract-list JSON -> schema check).
"""
import json
import logging
from pathlib import Path
from typing import Any, Optional

import click

from contractlist.errors import ContractListError, InvalidAbiError
from contractlist.generator.generate import GenerateOptions, generate_contract_list, load_abi
from contractlist.validator import validate_contract_list

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("contractlist.cli")


def _load_json(path: Path, param_hint: str) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Invalid JSON at {path}: {e}", param_hint=param_hint) from e


@click.group()
@click.option("--log-level", default="WARNING", show_default=True, envvar="CONTRACTLIST_LOG_LEVEL",
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Logging verbosity")
def cli(log_level: str) -> None:
    """Generate and validate contract-list documents."""
    logging.basicConfig(level=getattr(logging, log_level.upper()), format=LOG_FORMAT)


@cli.command()
@click.option("--abi", "-a", "abi_path", required=True,
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Path to ABI JSON file")
@click.option("--chain-id", "-c", required=True, type=int, help="Chain ID")
@click.option("--name", "-n", required=True, help="Contract display name")
@click.option("--hook-name", default=None, help="Hook name (defaults to name without spaces)")
@click.option("--output", "-o", default=None, type=click.Path(dir_okay=False, path_type=Path),
              help="Output file path (prints to stdout if omitted)")
@click.option("--include-view", is_flag=True, help="Include view functions")
@click.option("--include-pure", is_flag=True, help="Include pure functions")
@click.pass_context
def generate(
    ctx: click.Context,
    abi_path: Path,
    chain_id: int,
    name: str,
    hook_name: Optional[str],
    output: Optional[Path],
    include_view: bool,
    include_pure: bool,
) -> None:
    """Generate a contract-list JSON from an ABI file."""
    data = _load_json(abi_path, "--abi")
    try:
        abi = load_abi(data)
    except InvalidAbiError as e:
        raise click.BadParameter(str(e), param_hint="--abi") from e

    try:
        document = generate_contract_list(GenerateOptions(
            abi=abi,
            chainId=chain_id,
            name=name,
            hookName=hook_name,
            includeViewFunctions=include_view,
            includePureFunctions=include_pure,
        ))
    except ContractListError as e:
        logger.error(f"Generation failed: {e}")
        ctx.exit(1)

    out = json.dumps(document, indent=2)
    if output is not None:
        output.write_text(out + "\n", encoding="utf-8")
        click.echo(f"Contract list written to: {output.resolve()}")
        return
    click.echo(out)


@cli.command()
@click.option("--file", "-f", "file_path", required=True,
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Path to contract-list JSON")
@click.pass_context
def validate(ctx: click.Context, file_path: Path) -> None:
    """Validate a contract-list JSON against the schema."""
    document = _load_json(file_path, "--file")
    result = validate_contract_list(document)

    if not result.valid:
        click.echo("Validation failed:", err=True)
        for issue in result.errors:
            click.echo(f"  {issue.path}: {issue.message}", err=True)
        ctx.exit(1)

    click.echo("Validation OK")


def main() -> None:
    """Main entry point for the CLI."""
    cli(prog_name="contractlist")


if __name__ == "__main__":
    main()
