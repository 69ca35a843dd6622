"""Plan creation rules: expired-plan reconciliation, queue limit, start-date choice."""

import logging
from collections.abc import Callable, Sequence
from datetime import date, timedelta
from typing import Protocol

from mealplan_admin.db.models import Plan
from mealplan_admin.exceptions import PlanNotFoundError, TooManyPendingPlansError
from mealplan_admin.schemas.plans import PlanCreate, PlanRead

logger = logging.getLogger(__name__)


class PlanStore(Protocol):
    async def find_all_open(self) -> Sequence[Plan]: ...

    async def list_all(self, include_closed: bool = False) -> Sequence[Plan]: ...

    async def get(self, plan_id: int) -> Plan | None: ...

    async def save(self, plan: Plan) -> Plan: ...

    async def close_plan(self, plan_id: int) -> None: ...


class DateCalculator(Protocol):
    def calculate_end_date(self, start_date: date, total_days: int, meals_per_day: int) -> date: ...

    def first_working_day(self, day: date) -> date: ...


class PlanService:
    """
    Creates and closes plans.

    At most one plan may be queued ahead of the running one. Plans whose end
    date has passed are closed lazily, on the next creation attempt. A plan
    ending today is still active.
    """

    def __init__(
        self,
        store: PlanStore,
        calculator: DateCalculator,
        today: Callable[[], date] = date.today,
    ):
        self.store = store
        self.calculator = calculator
        self.today = today

    def end_date(self, plan: Plan) -> date:
        return self.calculator.calculate_end_date(plan.start_date, plan.total_days, plan.meals_per_day)

    def to_read(self, plan: Plan) -> PlanRead:
        return PlanRead(
            id=plan.id,
            start_date=plan.start_date,
            total_days=plan.total_days,
            meals_per_day=plan.meals_per_day,
            closed=plan.closed,
            end_date=self.end_date(plan),
        )

    async def create(self, request: PlanCreate) -> PlanRead:
        """
        Create a plan after closing expired ones.

        Raises TooManyPendingPlansError when more than one open plan survives
        the cleanup, or when the new plan would be a second plan starting in
        the future. Closures already made are kept either way.
        """
        today = self.today()
        open_plans = await self._close_expired(today)

        if len(open_plans) > 1:
            logger.warning(
                "Rejecting plan creation: %d open plans %s",
                len(open_plans), [p.id for p in open_plans],
            )
            raise TooManyPendingPlansError([p.id for p in open_plans])

        if request.start_date is not None:
            start_date = request.start_date
        elif open_plans:
            start_date = self.calculator.first_working_day(self.end_date(open_plans[0]) + timedelta(days=1))
        else:
            start_date = today

        pending = [p for p in open_plans if p.start_date > today]
        if pending and start_date > today:
            logger.warning(
                "Rejecting plan creation: plan %s already pending, new plan would start %s",
                pending[0].id, start_date,
            )
            raise TooManyPendingPlansError([p.id for p in open_plans])

        plan = await self.store.save(Plan.new(start_date, request.total_days, request.meals_per_day))
        logger.info(
            "Created plan id=%s start=%s total_days=%d meals_per_day=%d",
            plan.id, plan.start_date, plan.total_days, plan.meals_per_day,
        )
        return self.to_read(plan)

    async def _close_expired(self, today: date) -> list[Plan]:
        """Close every open plan whose end date is before today; return the rest."""
        still_open = []
        for plan in await self.store.find_all_open():
            end = self.end_date(plan)
            if end < today:
                logger.info("Closing expired plan id=%s (ended %s)", plan.id, end)
                await self.store.close_plan(plan.id)
                plan.closed = True
            else:
                still_open.append(plan)
        return still_open

    async def list_plans(self, include_closed: bool = False) -> list[PlanRead]:
        return [self.to_read(p) for p in await self.store.list_all(include_closed)]

    async def get_plan(self, plan_id: int) -> PlanRead:
        plan = await self.store.get(plan_id)
        if plan is None:
            raise PlanNotFoundError(plan_id)
        return self.to_read(plan)

    async def close_plan(self, plan_id: int) -> PlanRead:
        """Close a plan by hand. Closing it twice is harmless."""
        plan = await self.store.get(plan_id)
        if plan is None:
            raise PlanNotFoundError(plan_id)
        await self.store.close_plan(plan_id)
        plan.closed = True
        logger.info("Closed plan id=%s", plan_id)
        return self.to_read(plan)
