"""Cancel triggers and the pending (group, condition) requests that produce them."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Trigger:
    """A cancel into *action*, legal under *condition_flag*.

    Field order defines the sort order of the exposed cancel list.
    """
    action: int = 0
    condition_flag: int = 0


@dataclass(frozen=True, slots=True)
class TriggerRequest:
    group: int
    condition_flag: int
