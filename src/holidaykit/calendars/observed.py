"""
Observed-Date Policies

Pure functions moving a holiday's nominal date to the date it is observed.
A policy depends only on the weekday of the nominal date, never on which
holiday it is.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Union

from ..models.enums import ObservedPolicy


# Day shift per weekday (0=Monday ... 6=Sunday)
_SHIFTS: dict[ObservedPolicy, tuple[int, int, int, int, int, int, int]] = {
    ObservedPolicy.NONE: (0, 0, 0, 0, 0, 0, 0),
    # Tuesday..Friday back to the preceding Monday, weekend on to the next one
    ObservedPolicy.MOVE_TO_MONDAY: (0, -1, -2, -3, -4, 2, 1),
    ObservedPolicy.WEEKEND_TO_MONDAY: (0, 0, 0, 0, 0, 2, 1),
    ObservedPolicy.NEAREST_WEEKDAY: (0, 0, 0, 0, 0, -1, 1),
}


def shift_observed(holiday: date, policy: Union[ObservedPolicy, str]) -> date:
    """
    Calculate the observed date for a holiday.

    Args:
        holiday: The nominal holiday date
        policy: Observed policy (enum member or its string value)

    Returns:
        The observed date (the nominal date when the policy doesn't move it)
    """
    shift = _SHIFTS[ObservedPolicy(policy)][holiday.weekday()]
    return holiday + timedelta(days=shift)


def is_shifted(holiday: date, policy: Union[ObservedPolicy, str]) -> bool:
    """Check whether a policy moves the given nominal date."""
    return shift_observed(holiday, policy) != holiday
