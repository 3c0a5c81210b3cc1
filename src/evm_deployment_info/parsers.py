"""Config and deployment record parsers for evm-deployment-info."""

import json
import logging
import re
from pathlib import Path
from typing import Dict, List, Optional

from .constants import MAX_CHAIN_ID
from .exceptions import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigReadError,
    StoreParseError,
    StoreReadError,
)

logger = logging.getLogger(__name__)

# Object key followed by an opening brace: `polygonAmoy: {` or `"arbitrum-one": {`
_BLOCK_KEY = re.compile(
    r"""(?<![\w$])(?:(?P<ident>[A-Za-z_$][\w$]*)|(?P<quoted>"[^"\n]*"|'[^'\n]*'))\s*:\s*\{"""
)
_CHAIN_ID_FIELD = re.compile(r"(?<![\w$])chainId\s*:\s*")
_VALUE_END = re.compile(r"[,;}\n]")
_UNSIGNED = re.compile(r"\d+")


def _mask_literals(text: str) -> str:
    """
    Blank out comments and string literal contents, preserving offsets.

    Quotes themselves are kept so quoted keys can still be located;
    newlines are kept so line-based value scanning still works.
    """
    chars = list(text)
    n = len(text)

    def blank(start: int, end: int) -> None:
        for k in range(start, min(end, n)):
            if chars[k] != "\n":
                chars[k] = " "

    i = 0
    while i < n:
        c = text[i]
        if text.startswith("//", i):
            end = text.find("\n", i)
            end = n if end == -1 else end
            blank(i, end)
            i = end
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            end = n if end == -1 else end + 2
            blank(i, end)
            i = end
        elif c in "\"'`":
            j = i + 1
            while j < n and text[j] != c:
                if text[j] == "\\":
                    j += 1
                j += 1
            blank(i + 1, j)
            i = j + 1
        else:
            i += 1

    return "".join(chars)


def _brace_depths(masked: str) -> tuple[List[int], Dict[int, int]]:
    """
    Compute the nesting depth at each offset and the matching close brace of each open brace.

    Returns:
        Tuple of (depths, closing) where:
        - depths: depth[i] is the number of enclosing braces at offset i
        - closing: maps open brace offset -> close brace offset
          (unclosed braces map to the end of the text)
    """
    depths: List[int] = [0] * len(masked)
    closing: Dict[int, int] = {}
    stack: List[int] = []

    for i, c in enumerate(masked):
        if c == "{":
            depths[i] = len(stack)
            stack.append(i)
        elif c == "}":
            if stack:
                closing[stack.pop()] = i
            depths[i] = len(stack)
        else:
            depths[i] = len(stack)

    for open_pos in stack:
        closing[open_pos] = len(masked)

    return depths, closing


def _parse_chain_id(network: str, raw_value: str) -> int:
    """
    Parse a chainId token as an unsigned 64-bit integer.

    Raises:
        ConfigParseError: If the token is not a decimal unsigned integer in range
    """
    if not _UNSIGNED.fullmatch(raw_value):
        raise ConfigParseError(network, raw_value)
    chain_id = int(raw_value)
    if chain_id > MAX_CHAIN_ID:
        raise ConfigParseError(network, raw_value)
    return chain_id


def extract_networks(config_text: str) -> Dict[str, int]:
    """
    Extract network name -> chain id pairs from hardhat config source.

    A network is any `key: { ... }` block with a `chainId` field directly
    inside it. Blocks are delimited by brace depth, so a match never spans
    sibling blocks and fields of nested blocks are not attributed to their
    parent. Strings and comments are ignored.

    Args:
        config_text: Raw config file contents

    Returns:
        Dictionary mapping network name to chain id, in config order.
        Duplicate names keep the last occurrence. Empty if no blocks match.

    Raises:
        ConfigParseError: If a chainId value is not an unsigned integer
    """
    masked = _mask_literals(config_text)
    depths, closing = _brace_depths(masked)
    networks: Dict[str, int] = {}

    for block in _BLOCK_KEY.finditer(masked):
        if block.group("ident") is not None:
            name = block.group("ident")
        else:
            # Take the key from the original text; the masked copy is blank inside quotes
            start, end = block.span("quoted")
            name = config_text[start + 1 : end - 1]

        open_pos = block.end() - 1
        close_pos = closing[open_pos]
        inner_depth = depths[open_pos] + 1

        raw_value: Optional[str] = None
        for field_match in _CHAIN_ID_FIELD.finditer(masked, open_pos + 1, close_pos):
            if depths[field_match.start()] != inner_depth:
                continue
            value_start = field_match.end()
            value_end = _VALUE_END.search(masked, value_start, close_pos)
            stop = value_end.start() if value_end else close_pos
            # Trim on the masked copy so trailing comments are not part of the token
            segment = masked[value_start:stop]
            token_start = value_start + len(segment) - len(segment.lstrip())
            token_end = value_start + len(segment.rstrip())
            # Later keys override earlier ones, as in a JS object literal
            raw_value = config_text[token_start:token_end]

        if raw_value is None:
            continue

        networks[name] = _parse_chain_id(name, raw_value)
        logger.debug("Config network %s -> chain %s", name, networks[name])

    return networks


def load_networks(config_path: Path) -> Dict[str, int]:
    """
    Read a hardhat config file and extract its networks.

    Args:
        config_path: Path to hardhat.config.ts

    Returns:
        Dictionary mapping network name to chain id

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigReadError: If the file cannot be read or is not valid UTF-8
        ConfigParseError: If a chainId value is not an unsigned integer
    """
    if not config_path.is_file():
        raise ConfigNotFoundError(config_path)

    try:
        with open(config_path, encoding="utf-8") as f:
            config_text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(config_path, e) from e

    return extract_networks(config_text)


def read_deployed_address(record_path: Path) -> Optional[str]:
    """
    Read the first address from a deployed_addresses.json record.

    The record maps labels (e.g. "TokenModule#Token") to addresses. Entries
    are read in file order, so the first address is deterministic.

    Args:
        record_path: Path to the chain's deployed_addresses.json

    Returns:
        First non-empty string value, or None if the record is absent
        or holds no address

    Raises:
        StoreReadError: If the record exists but cannot be read
        StoreParseError: If the record is not a UTF-8 encoded JSON object
    """
    if not record_path.is_file():
        return None

    try:
        with open(record_path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise StoreReadError(record_path, e) from e

    # Decoding happens in json.loads; UnicodeDecodeError is a ValueError too
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise StoreParseError(record_path, e) from e

    if not isinstance(data, dict):
        raise StoreParseError(
            record_path, TypeError(f"expected a JSON object, got {type(data).__name__}")
        )

    for label, value in data.items():
        if isinstance(value, str) and value:
            logger.debug("Using %s from %s", label, record_path)
            return value

    return None
