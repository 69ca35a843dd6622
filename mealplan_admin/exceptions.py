"""Domain errors raised by the plan service."""


class PlanError(Exception):
    """Base class for plan business-rule failures."""


class TooManyPendingPlansError(PlanError):
    """Creating another plan would leave more than one plan queued ahead of today."""

    def __init__(self, open_plan_ids: list[int]):
        self.open_plan_ids = open_plan_ids
        super().__init__(
            f"Too many pending plans: open plans {open_plan_ids} already fill the queue"
        )


class PlanNotFoundError(PlanError):
    """No plan exists with the requested id."""

    def __init__(self, plan_id: int):
        self.plan_id = plan_id
        super().__init__(f"Plan {plan_id} not found")
