"""Output rendering for evm-deployment-info."""

import csv
import io
import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .aggregate import aggregate, display_label, group_names, title_case
from .exceptions import SinkWriteError
from .reconcile import audit_entries
from .types import AggregationGroup, ReconciliationResult

logger = logging.getLogger(__name__)

INDENT = "  "


class OutputFormat(Enum):
    """
    Output formats.

    Value strings are the names accepted on the command line.
    """

    TABLE = "table"
    JSON = "json"
    CSV = "csv"


def _dump_json(document: Dict[str, Any]) -> str:
    return json.dumps(document, separators=(",", ":")) + "\n"


def _csv_text(rows: Sequence[Sequence[Any]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue()


def _aligned_rows(rows: Sequence[Tuple[str, str]], indent: str) -> List[str]:
    """Two-column rows with the first column padded to a common width."""
    if not rows:
        return []
    width = max(len(left) for left, _ in rows)
    return [f"{indent}{left.ljust(width)}  {right}".rstrip() for left, right in rows]


def _grouped_rows(groups: Sequence[AggregationGroup]) -> List[str]:
    """Group headers with indented member rows; member values are optional."""
    lines: List[str] = []
    for group in groups:
        lines.append(f"{INDENT}{title_case(group.prefix)}")
        members = [(title_case(suffix), value or "") for suffix, value in group.entries]
        lines.extend(_aligned_rows(members, INDENT * 2))
    return lines


def listing_document(result: ReconciliationResult, aggregated: bool = False) -> Dict[str, Any]:
    """
    Build the JSON document of a listing.

    Args:
        result: Reconciliation result
        aggregated: Nest networks by ecosystem prefix

    Returns:
        {"deployments": ..., "missing": ...}; "missing" is omitted when
        every network has a deployment. Keys are raw config tokens.
    """
    deployments: Dict[str, Any]
    missing: Union[Dict[str, List[str]], List[str]]

    if aggregated:
        deployments = {
            group.prefix: {suffix: address for suffix, address in group.entries}
            for group in aggregate(result.found)
        }
        missing = group_names(aggregate(result.missing))
    else:
        deployments = {name: address for name, address in result.found}
        missing = list(result.missing)

    document: Dict[str, Any] = {"deployments": deployments}
    if missing:
        document["missing"] = missing
    return document


def _listing_csv(result: ReconciliationResult, aggregated: bool) -> str:
    rows: List[List[str]] = [["Network", "Address"]]

    if aggregated:
        for group in aggregate(result.found):
            for suffix, address in group.entries:
                rows.append([display_label(group.prefix, suffix), address])
    else:
        rows.extend([name, address] for name, address in result.found)

    if result.missing:
        rows.append([])
        rows.append(["Missing Networks"])
        if aggregated:
            for group in aggregate(result.missing):
                for suffix, _ in group.entries:
                    rows.append([display_label(group.prefix, suffix)])
        else:
            rows.extend([name] for name in result.missing)

    return _csv_text(rows)


def _listing_table(result: ReconciliationResult, aggregated: bool) -> str:
    lines = ["Deployments"]
    if not result.found:
        lines.append(f"{INDENT}(none)")
    elif aggregated:
        lines.extend(_grouped_rows(aggregate(result.found)))
    else:
        lines.extend(_aligned_rows(result.found, INDENT))

    if result.missing:
        lines.append("")
        lines.append("Missing Networks")
        if aggregated:
            lines.extend(_grouped_rows(aggregate(result.missing)))
        else:
            lines.extend(f"{INDENT}{name}" for name in result.missing)

    return "\n".join(lines) + "\n"


def render_listing(
    result: ReconciliationResult,
    output_format: OutputFormat = OutputFormat.TABLE,
    aggregated: bool = False,
) -> str:
    """
    Render found and missing deployments.

    Args:
        result: Reconciliation result
        output_format: Table, JSON or CSV
        aggregated: Group networks by ecosystem prefix; group and member
                    labels are shown in Title Case in table and CSV output

    Returns:
        Rendered text, newline-terminated
    """
    match output_format:
        case OutputFormat.JSON:
            return _dump_json(listing_document(result, aggregated))
        case OutputFormat.CSV:
            return _listing_csv(result, aggregated)
        case OutputFormat.TABLE:
            return _listing_table(result, aggregated)
        case _:
            raise ValueError(f"Unknown output format: {output_format}")


def audit_document(result: ReconciliationResult) -> Dict[str, Any]:
    """Build the JSON document of an audit."""
    return {
        "config_without_deployment": [
            {"network": entry.name, "chain_id": entry.chain_id}
            for entry in audit_entries(result)
        ],
        "deployment_without_config": list(result.orphaned),
    }


def _audit_csv(result: ReconciliationResult) -> str:
    rows: List[List[Any]] = [["Config Without Deployment"], ["Network", "Chain ID"]]
    rows.extend([entry.name, entry.chain_id] for entry in audit_entries(result))
    rows.append([])
    rows.append(["Deployment Without Config"])
    rows.append(["Chain ID"])
    rows.extend([chain_id] for chain_id in result.orphaned)
    return _csv_text(rows)


def _audit_table(result: ReconciliationResult) -> str:
    entries = audit_entries(result)
    if not entries and not result.orphaned:
        return "Config and deployments are in sync\n"

    lines: List[str] = []
    if entries:
        lines.append("Config networks without deployment")
        lines.extend(
            _aligned_rows([(entry.name, str(entry.chain_id)) for entry in entries], INDENT)
        )
    if result.orphaned:
        if lines:
            lines.append("")
        lines.append("Deployments without config")
        lines.extend(f"{INDENT}chain {chain_id}" for chain_id in result.orphaned)

    return "\n".join(lines) + "\n"


def render_audit(
    result: ReconciliationResult, output_format: OutputFormat = OutputFormat.TABLE
) -> str:
    """
    Render config networks without deployments and deployments without config.

    Args:
        result: Reconciliation result
        output_format: Table, JSON or CSV

    Returns:
        Rendered text, newline-terminated
    """
    match output_format:
        case OutputFormat.JSON:
            return _dump_json(audit_document(result))
        case OutputFormat.CSV:
            return _audit_csv(result)
        case OutputFormat.TABLE:
            return _audit_table(result)
        case _:
            raise ValueError(f"Unknown output format: {output_format}")


def write_output(content: str, sink: Optional[Union[Path, str]] = None) -> None:
    """
    Write rendered output to stdout or a file.

    Args:
        content: Rendered text
        sink: Destination file; parent directories are created.
              Writes to stdout when None.

    Raises:
        SinkWriteError: If the file cannot be written
    """
    if sink is None:
        sys.stdout.write(content)
        return

    sink_path = Path(sink)
    try:
        sink_path.parent.mkdir(parents=True, exist_ok=True)
        with open(sink_path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise SinkWriteError(sink_path, e) from e

    logger.info("Wrote output to %s", sink_path)
