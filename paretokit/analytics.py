"""Pure Pareto analytics over (category, count) observations."""

import logging
from math import copysign, floor, isfinite
from typing import Dict, Iterable, List, Optional, Union

from .models import AnalysisResult, AnalysisRow, Observation, SortOrder

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 80.0

EXPORT_RECOMMENDATIONS = (
    "Focus on top critical issues for maximum impact",
    "Address vital few to resolve 80% of problems",
    "Monitor trends to prevent escalation",
    "Regular review for continuous improvement",
)


def compute_pareto_analysis(
    observations: Iterable[Observation],
    sort_order: Union[SortOrder, str] = SortOrder.DESCENDING,
    threshold: float = DEFAULT_THRESHOLD,
) -> AnalysisResult:
    """
    Rank observations and annotate them with individual and cumulative share.

    The boundary row whose cumulative percentage first exceeds ``threshold``
    is itself counted as critical. A zero total yields zeroed percentages and
    no critical rows.
    """
    order = SortOrder(sort_order)
    observations_list = [_clamp_observation(obs) for obs in observations]
    if not observations_list:
        return empty_pareto_analysis(sort_order=order, threshold=threshold)

    ordered = _apply_sort_order(observations_list, order)
    total = sum(obs.count for obs in ordered)

    rows: List[AnalysisRow] = []
    running = 0
    for index, obs in enumerate(ordered):
        running += obs.count
        if total > 0:
            individual = _round_half_away(obs.count / total * 100, 1)
            cumulative = _round_half_away(running / total * 100, 1)
        else:
            individual = 0.0
            cumulative = 0.0
        rows.append(
            AnalysisRow(
                category=obs.category,
                count=obs.count,
                rank=index + 1,
                individual_percentage=individual,
                cumulative_percentage=cumulative,
            )
        )

    critical_count = _critical_count(rows, total, threshold)
    efficiency = int(_round_half_away(critical_count / len(rows) * 100, 0))

    return AnalysisResult(
        total=total,
        rows=tuple(rows),
        critical_count=critical_count,
        pareto_efficiency=efficiency,
        sort_order=order,
        threshold=threshold,
    )


def empty_pareto_analysis(
    sort_order: Union[SortOrder, str] = SortOrder.DESCENDING,
    threshold: float = DEFAULT_THRESHOLD,
) -> AnalysisResult:
    """Return the analysis of an empty observation list."""
    return AnalysisResult(
        total=0,
        rows=(),
        critical_count=0,
        pareto_efficiency=0,
        sort_order=SortOrder(sort_order),
        threshold=threshold,
    )


def classify_row(row: AnalysisRow, result: AnalysisResult) -> Dict:
    """Drill-down detail for a single row of ``result``."""
    is_critical = row.rank <= result.critical_count
    if is_critical:
        recommendation = "Immediate action required - this is a vital few issue"
    else:
        recommendation = "Monitor and address as resources allow"
    return {
        "category": row.category,
        "count": row.count,
        "rank_label": f"#{row.rank} of {len(result.rows)}",
        "individual_percentage": row.individual_percentage,
        "cumulative_percentage": row.cumulative_percentage,
        "priority": "critical" if is_critical else "secondary",
        "recommendation": recommendation,
    }


def build_export_payload(result: AnalysisResult, title: Optional[str] = None) -> Dict:
    """Return the structure handed to export collaborators (Excel/PDF writers)."""
    return {
        "title": title,
        "total": result.total,
        "critical_count": result.critical_count,
        "rows": [row.to_dict() for row in result.rows],
        "analysis": {
            "pareto_efficiency": result.pareto_efficiency,
            "top_issue_impact": result.top_issue_impact,
            "threshold": result.threshold,
            "sort_order": result.sort_order.value,
            "recommendations": list(EXPORT_RECOMMENDATIONS),
        },
    }


def _apply_sort_order(observations: List[Observation], order: SortOrder) -> List[Observation]:
    if order is SortOrder.CUSTOM:
        return list(observations)

    # sorted() is stable, so equal counts keep their input order.
    descending = sorted(observations, key=lambda obs: -obs.count)
    if order is SortOrder.ASCENDING:
        descending.reverse()
    return descending


def _critical_count(rows: List[AnalysisRow], total: int, threshold: float) -> int:
    if total <= 0:
        return 0
    for row in rows:
        if row.cumulative_percentage > threshold:
            return row.rank
    return len(rows)


def _clamp_observation(obs: Observation) -> Observation:
    count = obs.count
    if isinstance(count, float) and not isfinite(count):
        logger.warning("Non-finite count for %r treated as 0", obs.category)
        return Observation(category=obs.category, count=0)
    if count < 0:
        logger.warning("Negative count %s for %r clamped to 0", count, obs.category)
        return Observation(category=obs.category, count=0)
    return obs


def _round_half_away(value: float, digits: int) -> float:
    factor = 10 ** digits
    scaled = value * factor
    return copysign(floor(abs(scaled) + 0.5), scaled) / factor
