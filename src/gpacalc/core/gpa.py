from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterable, Optional

from gpacalc.core.models import ExistingGPA, Subject

logger = logging.getLogger(__name__)

ZERO_AVERAGE = "0.00"
CENT = Decimal("0.01")


def _format_average(weighted: float, credits: float) -> str:
    if credits == 0:
        return ZERO_AVERAGE
    average = weighted / credits
    if not math.isfinite(average):
        return f"{average:.2f}"
    # half-way values round away from zero, on the float's exact binary value
    with localcontext() as ctx:
        ctx.prec = 400
        return f"{Decimal(average).quantize(CENT, rounding=ROUND_HALF_UP):f}"


def _selected_totals(subjects: Iterable[Subject]) -> tuple[float, float, int]:
    weighted = 0
    total_credits = 0
    count = 0
    for s in subjects:
        if not s.selected:
            continue
        weighted += s.score * s.credit
        total_credits += s.credit
        count += 1
    return weighted, total_credits, count


def calculate_weighted_average(
    subjects: Iterable[Subject],
    existing_gpa: Optional[ExistingGPA] = None,
) -> str:
    """
    Credit-weighted mean score of the selected subjects, as a two-decimal string.

    The baseline is merged only when it carries a positive credit count;
    otherwise only the selected subjects are averaged. "0.00" when there
    are no credits to divide by.
    """
    weighted, credits, count = _selected_totals(subjects)

    if existing_gpa is not None and existing_gpa.credits > 0:
        total_weighted = weighted + existing_gpa.score * existing_gpa.credits
        total_credits = credits + existing_gpa.credits
        logger.debug(
            "Averaging %d selected subjects (%s credits) with baseline of %s credits",
            count,
            credits,
            existing_gpa.credits,
        )
        return _format_average(total_weighted, total_credits)

    logger.debug("Averaging %d selected subjects (%s credits) without baseline", count, credits)
    return _format_average(weighted, credits)


def calculate_total_credits(
    subjects: Iterable[Subject],
    existing_gpa: Optional[ExistingGPA] = None,
) -> float:
    """
    Credits of the selected subjects plus the baseline's credits.

    Unlike the average, the baseline's credits are added whenever a baseline
    is given, whatever their sign.
    """
    _, credits, _ = _selected_totals(subjects)
    if existing_gpa is not None:
        credits += existing_gpa.credits
    return credits
