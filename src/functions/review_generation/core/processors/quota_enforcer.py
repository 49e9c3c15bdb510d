"""Quota and spread control for emoji-decorated review lines.

A batch in which every other review ends with an emoji reads as synthetic,
and so does a batch where all emoji are clumped together. The enforcer keeps
emoji on a subset of lines whose size falls inside a target fraction of the
batch, spreading the kept lines out across the batch:

* at most ``max_run_length`` consecutive lines keep an emoji;
* after a run of two or more decorated lines, the next
  ``min_gap_after_max_run`` lines stay plain.

Selection is greedy: ``t`` evenly spaced ideal slots are computed and each
slot takes the nearest decorated line that keeps the spacing rules intact.
When no remaining line keeps them intact the slot takes the nearest line
anyway, so the spacing rules yield to the quota on very tight inputs.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Iterable, Optional, Sequence

from ..contracts.review import SpreadConstraints
from ..utils.emoji import has_emoji, strip_emojis

logger = logging.getLogger(__name__)

# Guards floor/ceil against float noise such as 20 * 0.15 == 3.0000000000000004.
_FRACTION_PRECISION = 9


def decorated_indices(lines: Sequence[str]) -> list[int]:
    return [index for index, line in enumerate(lines) if has_emoji(line)]


def target_bounds(size: int, constraints: SpreadConstraints) -> tuple[int, int]:
    """Inclusive ``(low, high)`` range for the number of decorated lines."""

    if constraints.min_count is not None:
        low = constraints.min_count
    else:
        low = math.floor(round(size * constraints.min_fraction, _FRACTION_PRECISION))
    if constraints.max_count is not None:
        high = constraints.max_count
    else:
        high = math.ceil(round(size * constraints.max_fraction, _FRACTION_PRECISION))
    return low, max(high, low)


def draw_target(
    size: int,
    available: int,
    constraints: SpreadConstraints,
    rng: random.Random,
) -> int:
    low, high = target_bounds(size, constraints)
    return min(rng.randint(low, high), available)


def ideal_slots(size: int, target: int) -> list[int]:
    """Evenly spaced positions ``round(k * size / (target + 1))``, k = 1..target."""

    gap = size / (target + 1)
    return [int(math.floor(k * gap + 0.5)) for k in range(1, target + 1)]


def _runs(indices: Iterable[int]) -> list[tuple[int, int]]:
    """Maximal runs of consecutive indices as ``(start, end)`` pairs."""

    runs: list[tuple[int, int]] = []
    for index in sorted(indices):
        if runs and index == runs[-1][1] + 1:
            runs[-1] = (runs[-1][0], index)
        else:
            runs.append((index, index))
    return runs


def satisfies_spacing(
    committed: set[int],
    candidate: int,
    constraints: SpreadConstraints,
) -> bool:
    """Check the run-length and post-run gap rules for ``committed + candidate``."""

    runs = _runs(committed | {candidate})
    for position, (start, end) in enumerate(runs):
        length = end - start + 1
        if length > constraints.max_run_length:
            return False
        if length >= 2 and position + 1 < len(runs):
            next_start = runs[position + 1][0]
            if next_start - end - 1 < constraints.min_gap_after_max_run:
                return False
    return True


def _closest(
    candidates: Iterable[int],
    ideal: int,
    committed: set[int],
    constraints: SpreadConstraints,
    *,
    enforce_spacing: bool,
) -> Optional[int]:
    best: Optional[int] = None
    best_distance = math.inf
    for index in candidates:
        distance = abs(index - ideal)
        if distance >= best_distance:
            continue
        if enforce_spacing and not satisfies_spacing(committed, index, constraints):
            continue
        best, best_distance = index, distance
    return best


def select_spread_indices(
    size: int,
    candidates: Sequence[int],
    target: int,
    constraints: SpreadConstraints,
) -> set[int]:
    """Choose up to ``target`` members of ``candidates`` spread across ``size`` lines."""

    committed: set[int] = set()
    if target <= 0:
        return committed

    for ideal in ideal_slots(size, target):
        unused = [index for index in candidates if index not in committed]
        if not unused:
            break
        pick = _closest(unused, ideal, committed, constraints, enforce_spacing=True)
        if pick is None:
            pick = _closest(unused, ideal, committed, constraints, enforce_spacing=False)
            logger.debug("Spacing relaxed for slot %d; picked line %s", ideal, pick)
        committed.add(pick)

    for index in candidates:
        if len(committed) >= target:
            break
        if index not in committed and satisfies_spacing(committed, index, constraints):
            committed.add(index)

    return committed


def enforce_emoji_quota(
    lines: Sequence[str],
    constraints: Optional[SpreadConstraints] = None,
    rng: Optional[random.Random] = None,
) -> list[str]:
    """Strip emoji from every line outside a well-spread, quota-sized subset."""

    constraints = constraints or SpreadConstraints()
    candidates = decorated_indices(lines)
    if not candidates:
        return list(lines)

    rng = rng or random.Random()
    size = len(lines)
    target = draw_target(size, len(candidates), constraints, rng)
    if target <= 0:
        logger.debug("Emoji target is 0 for %d lines; stripping all emoji", size)
        return [strip_emojis(line) for line in lines]

    keep = select_spread_indices(size, candidates, target, constraints)
    logger.debug(
        "Emoji quota: %d decorated of %d lines, target %d, kept %d",
        len(candidates),
        size,
        target,
        len(keep),
    )
    return [line if index in keep else strip_emojis(line) for index, line in enumerate(lines)]
