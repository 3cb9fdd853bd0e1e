import math
from typing import Iterable, Mapping

COMPLETE = 100


def is_complete(sub_goal: Mapping) -> bool:
    return sub_goal.get("progress") == COMPLETE


def compute_overall_progress(sub_goals: Iterable[Mapping]) -> int:
    """
    Percentage of sub-goals at exactly 100, rounded half-up.
    Never stored: recomputed from the current list on every read.
    """
    sub_goals = list(sub_goals or [])
    total = len(sub_goals)
    if total == 0:
        return 0

    completed = sum(1 for sg in sub_goals if is_complete(sg))
    return int(math.floor(100 * completed / total + 0.5))


def toggled_progress(current) -> int:
    # Strict binary flip: anything other than exactly 100 counts as not done
    return 0 if current == COMPLETE else COMPLETE
