"""Catalog construction: known contracts into initial ledger records."""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from ..ledger.models import DeploymentRecord, MethodRecord
from .artifacts import ContractArtifact
from .bytecode import is_empty_bytecode
from .selectors import method_id

logger = logging.getLogger(__name__)


@dataclass
class Catalog:
    methods: Dict[str, MethodRecord] = field(default_factory=dict)
    deployments: List[DeploymentRecord] = field(default_factory=list)


def build_catalog(artifacts: Iterable[ContractArtifact]) -> Catalog:
    """
    Produce the initial method and deployment records for a set of artifacts.

    Read-only (view/pure) functions and contracts without creation bytecode
    (interfaces, abstract contracts) get no method records: they can never be
    the target of a gas-consuming transaction. A selector collision inside one
    contract overwrites the earlier record.

    Raises:
        CatalogError: if an artifact's ABI is malformed
    """
    catalog = Catalog()

    for artifact in artifacts:
        catalog.deployments.append(DeploymentRecord(
            name=artifact.name,
            bytecode=artifact.bytecode,
            deployed_bytecode=artifact.deployed_bytecode,
        ))

        methods = artifact.methods()
        if is_empty_bytecode(artifact.bytecode):
            logger.debug(f"{artifact.name} has no creation bytecode, skipping its methods")
            continue

        for method in methods:
            if method.is_read_only:
                continue

            key = method_id(artifact.name, method.selector)
            if key in catalog.methods:
                logger.warning(
                    f"Selector collision in {artifact.name}: {method.signature} replaces "
                    f"{catalog.methods[key].fn_sig}"
                )
            catalog.methods[key] = MethodRecord(
                key=method.selector,
                contract=artifact.name,
                method=method.name,
                fn_sig=method.signature,
            )

    logger.info(
        f"Catalog built: {len(catalog.deployments)} contract(s), {len(catalog.methods)} method(s)"
    )
    return catalog
