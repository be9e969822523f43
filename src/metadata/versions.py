"""Version list ordering, filtering and default selection.

None of this compares versions semantically: order is whatever the
repository declares, optionally reversed.
"""

import logging
import re
from typing import List, Optional, Pattern, Sequence, Union

from constants import DefaultSelection, SortOrder
from .models import VersioningMetadata

logger = logging.getLogger(__name__)


def _coerce_order(order: Union[SortOrder, str, None]) -> SortOrder:
    if isinstance(order, SortOrder):
        return order
    if isinstance(order, str) and order.strip().upper() == SortOrder.DESC.value:
        return SortOrder.DESC
    return SortOrder.ASC


def sort_versions(versions: Sequence[str], order: Union[SortOrder, str, None]) -> List[str]:
    """Return ``versions`` in declared order (ASC) or reversed (DESC).

    Unknown or missing orders behave like ASC.
    """
    if _coerce_order(order) is SortOrder.DESC:
        return list(reversed(versions))
    return list(versions)


def parse_max_versions(value: Union[str, int, None]) -> Optional[int]:
    """Parse the configured cap; None means unlimited.

    Non-numeric input is not an error, it just lifts the cap.
    """
    if isinstance(value, int):
        return max(value, 0)
    try:
        return max(int(str(value).strip()), 0)
    except (TypeError, ValueError):
        return None


def compile_version_filter(pattern: Optional[str]) -> Optional[Pattern[str]]:
    """Compile the filter regex; None means match everything.

    An invalid pattern also yields None and a warning, so a bad filter
    shows all versions rather than aborting the resolution.
    """
    if pattern is None or not pattern.strip():
        return None
    try:
        return re.compile(pattern)
    except re.error as exc:
        logger.warning("Invalid version filter %r ignored: %s", pattern, exc)
        return None


def filter_versions(
    versions: Sequence[str],
    pattern: Optional[str],
    max_count: Union[str, int, None] = None,
) -> List[str]:
    """Keep versions fully matching ``pattern``, stopping at ``max_count`` matches.

    The input is expected to be sorted already, so the cap keeps the
    head of the requested order.
    """
    regex = compile_version_filter(pattern)
    cap = parse_max_versions(max_count)
    result: List[str] = []
    if cap == 0:
        return result
    for candidate in versions:
        if regex is None or regex.fullmatch(candidate):
            result.append(candidate)
            if cap is not None and len(result) >= cap:
                break
    return result


def select_default(
    policy: Optional[str],
    metadata: VersioningMetadata,
    filtered_versions: Sequence[str],
) -> Optional[str]:
    """Map a default-value token to one concrete version.

    Args:
        policy: FIRST, LAST, LATEST, RELEASE or a literal version.
        metadata: Freshly fetched metadata (for LATEST and RELEASE).
        filtered_versions: Sorted and filtered version list (for FIRST and LAST).

    Returns:
        The chosen version, or None when there is no usable default.
    """
    if policy is None:
        return None
    if policy == DefaultSelection.FIRST.value:
        chosen = filtered_versions[0] if filtered_versions else None
    elif policy == DefaultSelection.LAST.value:
        chosen = filtered_versions[-1] if filtered_versions else None
    elif policy == DefaultSelection.LATEST.value:
        chosen = metadata.latest
    elif policy == DefaultSelection.RELEASE.value:
        chosen = metadata.release
    else:
        chosen = policy
    if chosen is None or not chosen.strip():
        return None
    return chosen
