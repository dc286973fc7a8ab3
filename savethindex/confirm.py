from collections import OrderedDict

import click
from ape.utils import ZERO_ADDRESS


def _abort() -> None:
    print("Aborting deployment!")
    raise click.Abort()


def _confirm_deployment(contract_name: str) -> None:
    """Asks the user to confirm the deployment of a single contract."""
    answer = input(f"Deploy {contract_name} Y/N? ")
    if answer.lower().strip() == "n":
        _abort()


def _confirm_zero_address() -> None:
    answer = input("Zero Address detected for deployment parameter; Continue? Y/N? ")
    if answer.lower().strip() == "n":
        _abort()


def _print_resolution(resolved_params: OrderedDict, contract_name: str) -> bool:
    """Prints the constructor parameters; returns True if any of them is the zero address."""
    print(f"\nConstructor parameters for {contract_name}")
    contains_zero_address = False
    for name, resolved_value in resolved_params.items():
        print(f"\t{name}={resolved_value}")
        if not contains_zero_address:
            contains_zero_address = resolved_value == ZERO_ADDRESS
    return contains_zero_address


def _confirm_resolution(resolved_params: OrderedDict, contract_name: str) -> None:
    """Asks the user to confirm the resolved constructor parameters for a single contract."""
    contains_zero_address = _print_resolution(resolved_params, contract_name)
    _confirm_deployment(contract_name)
    if contains_zero_address:
        _confirm_zero_address()
