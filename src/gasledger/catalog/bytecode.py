"""Bytecode normalization and link-placeholder aware matching."""

import re
from functools import lru_cache
from typing import Optional

# Unlinked library references: "__$<34 hex>$__" (solc >= 0.5) or "__LibName______" (older),
# always 40 characters wide.
LINK_PLACEHOLDER = re.compile(r"__.{38}")
# Libraries push their own address as PUSH20 0xff..ff until deployment patches it in.
LIBRARY_SELF_ADDRESS = re.compile(r"73f{40}")


def normalize_bytecode(bytecode: Optional[str]) -> str:
    """Strip the 0x prefix and lowercase a hex bytecode string."""
    if not bytecode:
        return ""
    if bytecode.startswith("0x") or bytecode.startswith("0X"):
        bytecode = bytecode[2:]
    return bytecode.lower()


def is_empty_bytecode(bytecode: Optional[str]) -> bool:
    """Interfaces and abstract contracts compile to empty bytecode."""
    return normalize_bytecode(bytecode) == ""


@lru_cache(maxsize=512)
def bytecode_pattern(bytecode: str) -> "re.Pattern[str]":
    """
    Compile a known bytecode into a regex where link placeholders match any address.

    Bytecode without placeholders compiles to a literal pattern, so matching it is
    plain case-insensitive hex equality.
    """
    normalized = normalize_bytecode(bytecode)

    parts = []
    position = 0
    placeholders = sorted(
        [m.span() for m in LINK_PLACEHOLDER.finditer(normalized)]
        + [(m.start() + 2, m.end()) for m in LIBRARY_SELF_ADDRESS.finditer(normalized)]
    )
    for start, end in placeholders:
        if start < position:
            continue
        parts.append(re.escape(normalized[position:start]))
        parts.append(f"[0-9a-f]{{{end - start}}}")
        position = end
    parts.append(re.escape(normalized[position:]))

    return re.compile("".join(parts))


def matches_creation_prefix(input_data: str, creation_bytecode: str) -> bool:
    """
    True if a deployment transaction's input starts with the creation bytecode.

    Constructor arguments are appended after the fixed bytecode and are ignored.
    """
    if is_empty_bytecode(creation_bytecode):
        return False
    return bytecode_pattern(creation_bytecode).match(normalize_bytecode(input_data)) is not None


def matches_runtime_bytecode(code: str, runtime_bytecode: str) -> bool:
    """True if code deployed on chain equals a known runtime bytecode (placeholders masked)."""
    if is_empty_bytecode(runtime_bytecode) or is_empty_bytecode(code):
        return False
    return bytecode_pattern(runtime_bytecode).fullmatch(normalize_bytecode(code)) is not None
