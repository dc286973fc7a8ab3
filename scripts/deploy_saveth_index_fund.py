#!/usr/bin/python3

import click
from ape import accounts
from ape.cli import ConnectedProviderCommand
from ape.cli.choices import select_account

from savethindex.deploy import deploy_index_fund, get_contract_container
from savethindex.options import autosign_option, contract_name_option, verify_option
from savethindex.types import RequiredText


@click.command(cls=ConnectedProviderCommand)
@click.option(
    "--account",
    "-a",
    "account_alias",
    help="Alias of the ape account to deploy from; prompts when omitted",
    type=click.STRING,
    required=False,
)
@contract_name_option
@autosign_option
@verify_option
def cli(account_alias, contract_name, autosign, verify):
    """Deploy a savETH index fund contract."""
    try:
        deployer = accounts.load(account_alias) if account_alias else select_account()
        if autosign:
            print("WARNING: Autosign is enabled. Transactions will be signed automatically.")
            deployer.set_autosign(True)
        print(f"Using the account: {deployer.address}")

        container = get_contract_container(contract_name)
        saveth_registry = click.prompt("savETH Registry?", type=RequiredText(), prompt_suffix=" ")
        share_recipient = click.prompt(
            "Recipient of shares?", type=RequiredText(), prompt_suffix=" "
        )

        instance = deploy_index_fund(
            account=deployer,
            container=container,
            saveth_registry=saveth_registry,
            share_recipient=share_recipient,
            confirm=not autosign,
            publish=verify,
        )
    except click.Abort:
        raise
    except Exception as e:
        click.secho(f"x {e}", fg="red", err=True)
        raise click.Abort()

    print("done", instance.address)


if __name__ == "__main__":
    cli()
