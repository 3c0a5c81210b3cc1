"""Grouping of network names into ecosystem buckets."""

import re
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .constants import MAINNET_SUFFIX
from .types import AggregationGroup

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def split_network_name(name: str) -> Tuple[str, str]:
    """
    Split a network name at its first internal uppercase letter.

    Examples:
        "polygonAmoy" -> ("polygon", "Amoy")
        "EthereumMainnet" -> ("Ethereum", "Mainnet")
        "arbitrumOneSepolia" -> ("arbitrum", "OneSepolia")
        "Ethereum" -> ("Ethereum", "Mainnet")

    Args:
        name: Network name as declared in config

    Returns:
        Tuple of (prefix, suffix); suffix is "Mainnet" when the name
        has no uppercase letter after its first character
    """
    for i, c in enumerate(name[1:], start=1):
        if c.isupper():
            return name[:i], name[i:]
    return name, MAINNET_SUFFIX


def _suffix_key(entry: Tuple[str, Any]) -> Tuple[bool, str]:
    suffix = entry[0]
    return (suffix != MAINNET_SUFFIX, suffix)


def aggregate(
    items: Iterable[Union[str, Tuple[str, Any]]],
) -> List[AggregationGroup]:
    """
    Group networks by ecosystem prefix.

    Args:
        items: Network names, or (name, value) pairs such as (name, address).
               Bare names get a value of None.

    Returns:
        Groups ordered by prefix. Within a group the "Mainnet" entry comes
        first, then the rest by suffix; equal suffixes keep input order.
    """
    grouped: Dict[str, List[Tuple[str, Optional[Any]]]] = {}

    for item in items:
        if isinstance(item, str):
            name, value = item, None
        else:
            name, value = item
        prefix, suffix = split_network_name(name)
        grouped.setdefault(prefix, []).append((suffix, value))

    return [
        AggregationGroup(prefix=prefix, entries=sorted(grouped[prefix], key=_suffix_key))
        for prefix in sorted(grouped)
    ]


def title_case(token: str) -> str:
    """
    Convert a camel-case token to Title Case for display.

    A space is inserted before each uppercase letter that follows a
    lowercase letter or digit, then each word's first letter is upper-cased.

    Examples:
        "arbitrumSepolia" -> "Arbitrum Sepolia"
        "base" -> "Base"
        "zkSync2Era" -> "Zk Sync2 Era"
    """
    words = _WORD_BOUNDARY.sub(" ", token).split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def display_label(prefix: str, suffix: str) -> str:
    """Title Case "<prefix> <suffix>" label of an aggregated network."""
    return f"{title_case(prefix)} {title_case(suffix)}"


def group_names(groups: Sequence[AggregationGroup]) -> Dict[str, List[str]]:
    """Map each group prefix to its ordered suffixes."""
    return {group.prefix: [suffix for suffix, _ in group.entries] for group in groups}
