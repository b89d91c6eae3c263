"""Contract artifact loading (Hardhat, Truffle and Foundry JSON outputs)."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..errors import CatalogError
from .selectors import function_selector, function_signature

logger = logging.getLogger(__name__)

READ_ONLY_MUTABILITY = {"view", "pure"}


class MethodSignature(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    signature: str
    selector: str
    state_mutability: str = "nonpayable"

    @property
    def is_read_only(self) -> bool:
        return self.state_mutability in READ_ONLY_MUTABILITY


class ContractArtifact(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    bytecode: str = "0x"
    deployed_bytecode: str = "0x"
    abi: List[Dict[str, Any]] = Field(default_factory=list)

    def methods(self) -> List[MethodSignature]:
        """
        Function entries of the ABI with their selectors.

        Raises:
            CatalogError: if a function entry lacks a name or has malformed inputs
        """
        methods = []
        for item in self.abi:
            if item.get("type", "function") != "function":
                continue
            if not item.get("name"):
                raise CatalogError("ABI function entry without a name", self.name)
            try:
                signature = function_signature(item)
            except (KeyError, TypeError) as e:
                raise CatalogError(f"malformed inputs for {item['name']}: {e}", self.name) from e

            mutability = item.get("stateMutability")
            if mutability is None:
                # Pre-0.5 ABIs only carry the "constant" flag
                mutability = "view" if item.get("constant") else "nonpayable"

            methods.append(MethodSignature(
                name=item["name"],
                signature=signature,
                selector=function_selector(signature),
                state_mutability=mutability,
            ))
        return methods


def _bytecode_field(value: Any, field: str, name: str) -> str:
    # Foundry nests the hex under {"object": ...}
    if isinstance(value, dict):
        value = value.get("object")
    if value is None or value == "":
        return "0x"
    if not isinstance(value, str):
        raise CatalogError(f"{field} is not a hex string", name)
    return value if value.startswith("0x") else "0x" + value


def parse_artifact(data: Dict[str, Any], default_name: Optional[str] = None) -> ContractArtifact:
    """
    Build a ContractArtifact from a decoded artifact JSON document.

    Args:
        data: Artifact JSON (Hardhat/Truffle: contractName/abi/bytecode/deployedBytecode;
              Foundry: abi/bytecode.object/deployedBytecode.object)
        default_name: Name to use when the document carries none (Foundry file stem)

    Raises:
        CatalogError: if the artifact has no name or no ABI list
    """
    name = data.get("contractName") or data.get("name") or default_name
    if not name:
        raise CatalogError("artifact has no contract name")

    abi = data.get("abi")
    if not isinstance(abi, list):
        raise CatalogError("artifact has no ABI list", name)

    return ContractArtifact(
        name=name,
        bytecode=_bytecode_field(data.get("bytecode"), "bytecode", name),
        deployed_bytecode=_bytecode_field(data.get("deployedBytecode"), "deployedBytecode", name),
        abi=abi,
    )


def load_artifact_file(path: Path) -> ContractArtifact:
    try:
        data = json.loads(Path(path).read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"cannot read artifact {path}: {e}") from e
    if not isinstance(data, dict):
        raise CatalogError(f"artifact {path} is not a JSON object")
    return parse_artifact(data, default_name=Path(path).stem)


def load_artifacts(path: Union[str, Path]) -> List[ContractArtifact]:
    """
    Load contract artifacts from a single file or a build directory tree.

    Inside directories, JSON files without an "abi" key (Hardhat build-info,
    *.dbg.json) are skipped. Duplicate contract names keep the first artifact.

    Raises:
        CatalogError: if the path is missing or an artifact is malformed
    """
    path = Path(path)
    if not path.exists():
        raise CatalogError(f"artifact path {path} does not exist")

    if path.is_file():
        return [load_artifact_file(path)]

    artifacts: List[ContractArtifact] = []
    seen = set()
    for file in sorted(path.rglob("*.json")):
        if file.name.endswith(".dbg.json"):
            continue
        try:
            data = json.loads(file.read_text())
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogError(f"cannot read artifact {file}: {e}") from e
        if not isinstance(data, dict) or "abi" not in data:
            logger.debug(f"Skipping non-artifact JSON {file}")
            continue

        artifact = parse_artifact(data, default_name=file.stem)
        if artifact.name in seen:
            logger.warning(f"Duplicate artifact for {artifact.name} at {file}, keeping the first one")
            continue
        seen.add(artifact.name)
        artifacts.append(artifact)

    logger.info(f"Loaded {len(artifacts)} contract artifact(s) from {path}")
    return artifacts
