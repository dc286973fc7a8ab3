from collections import OrderedDict

from ape import project
from ape.api import AccountAPI
from ape.contracts import ContractContainer, ContractInstance

from savethindex.confirm import _confirm_resolution, _print_resolution


def get_contract_container(contract_name: str) -> ContractContainer:
    """Finds a contract in the ape project, then in the project's dependencies."""
    try:
        return getattr(project, contract_name)
    except AttributeError:
        pass

    for versions in project.dependencies.values():
        for dependency in versions.values():
            container = getattr(dependency, contract_name, None)
            if container is not None:
                return container

    raise ValueError(
        f"No '{contract_name}' contract found in the project or its dependencies; "
        "add the savETH contracts as an ape dependency."
    )


def deploy_index_fund(
    account: AccountAPI,
    container: ContractContainer,
    saveth_registry: str,
    share_recipient: str,
    confirm: bool = True,
    publish: bool = False,
) -> ContractInstance:
    """
    Deploys a savETH index fund owning shares on behalf of share_recipient.
    Blocks until the deployment transaction is confirmed.
    """
    contract_name = container.contract_type.name
    constructor_params = OrderedDict(
        savETHRegistry=saveth_registry,
        shareRecipient=share_recipient,
    )
    if confirm:
        _confirm_resolution(constructor_params, contract_name)
    else:
        _print_resolution(constructor_params, contract_name)

    return account.deploy(container, *constructor_params.values(), publish=publish)
