"""Check the ``tododag`` import contracts one at a time with Import Linter."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import click
from importlinter.cli import lint_imports_command

PROJECT_CONFIG = Path(__file__).resolve().parents[1] / "pyproject.toml"
CONTRACT_IDS = ("layers", "domain-framework-free")


def build_lint_args(
    config: Path,
    contract: str,
    *,
    no_cache: bool = False,
    verbose: bool = False,
) -> list[str]:
    """Translate runner options into ``lint-imports`` arguments for one contract."""

    args = ["--config", str(config), "--contract", contract]
    if no_cache:
        args.append("--no-cache")
    if verbose:
        args.append("--verbose")
    return args


def run_lint_imports(args: Sequence[str]) -> int:
    """Invoke Import Linter's Click command and return its exit code."""

    try:
        lint_imports_command.main(
            args=list(args),
            prog_name="lint-imports",
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except SystemExit as exc:
        # lint-imports ends with sys.exit(code) even outside standalone mode.
        return exc.code if isinstance(exc.code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 1
    return 0


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=PROJECT_CONFIG,
    show_default=True,
    help="File holding the [tool.importlinter] contracts.",
)
@click.option(
    "--contract",
    "contracts",
    multiple=True,
    help="Contract id to check. Repeat to check several; defaults to all of them.",
)
@click.option("--no-cache", is_flag=True, help="Rebuild the import graph from scratch.")
@click.option("--verbose", is_flag=True, help="Pass --verbose through to lint-imports.")
def main(config_path: Path, contracts: Sequence[str], no_cache: bool, verbose: bool) -> None:
    """Lint each import contract and name the ones that are broken."""

    selected = list(contracts) or list(CONTRACT_IDS)
    broken = [
        contract
        for contract in selected
        if run_lint_imports(
            build_lint_args(config_path, contract, no_cache=no_cache, verbose=verbose)
        )
    ]

    if broken:
        click.echo(f"Broken import contracts: {', '.join(broken)}", err=True)
        raise click.exceptions.Exit(1)
    click.echo(f"Import contracts kept: {', '.join(selected)}")


if __name__ == "__main__":  # pragma: no cover
    main()
