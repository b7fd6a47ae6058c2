"""Code-flow extraction: SARIF codeFlows to an ordered, deduplicated dataflow."""

from __future__ import annotations

import logging
from typing import List, Optional, Set

from issuebridge.errors import PathResolutionError
from issuebridge.issues.models import DataflowElement, Position, Range
from issuebridge.issues.paths import resolve_location
from issuebridge.sarif.models import Region, Result

logger = logging.getLogger(__name__)


def region_to_flow_range(region: Region) -> Range:
    """0-based range for a flow step. The end column is kept as reported.

    Not the same rule as :func:`issuebridge.sarif.mapper.region_to_issue_range`;
    the two must stay separate.
    """
    return Range(
        start=Position(line=region.start_line - 1, character=region.start_column - 1),
        end=Position(line=region.end_line - 1, character=region.end_column),
    )


def flow_key(path: str, start_line: int) -> str:
    return f"{path}L{start_line:04d}"


def extract_dataflow(
    result: Result,
    base_dir: str,
    log: Optional[logging.Logger] = None,
) -> List[DataflowElement]:
    """Walk codeFlows → threadFlows → locations; first occurrence of a line wins."""
    log = log or logger
    dataflow: List[DataflowElement] = []
    seen: Set[str] = set()

    for code_flow in result.code_flows:
        for thread_flow in code_flow.thread_flows:
            for location in thread_flow.locations:
                physical = location.physical_location
                try:
                    path = resolve_location(base_dir, physical.uri)
                except PathResolutionError as exc:
                    log.error("%s", exc)
                    continue

                region = physical.region
                key = flow_key(path, region.start_line)
                if key in seen:
                    continue
                seen.add(key)
                dataflow.append(
                    DataflowElement(
                        position=len(dataflow),
                        file_path=path,
                        flow_range=region_to_flow_range(region),
                        content=region.snippet,
                    )
                )
    return dataflow
