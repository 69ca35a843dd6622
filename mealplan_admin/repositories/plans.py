"""SQLAlchemy-backed plan store."""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from mealplan_admin.db.models import Plan


class PlanRepository:
    """
    Persists plans through an async session.

    Writes commit immediately: a closure must survive even when the request
    that triggered it is later rejected and its session rolled back.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all_open(self) -> list[Plan]:
        """Return every plan not manually closed, oldest start first."""
        result = await self.db.execute(
            select(Plan).where(Plan.closed.is_(False)).order_by(Plan.start_date.asc(), Plan.id.asc())
        )
        return list(result.scalars())

    async def list_all(self, include_closed: bool = False) -> list[Plan]:
        query = select(Plan)
        if not include_closed:
            query = query.where(Plan.closed.is_(False))
        query = query.order_by(Plan.start_date.asc(), Plan.id.asc())
        result = await self.db.execute(query)
        return list(result.scalars())

    async def get(self, plan_id: int) -> Plan | None:
        return await self.db.get(Plan, plan_id)

    async def save(self, plan: Plan) -> Plan:
        """Insert a new plan and return it with its assigned id."""
        self.db.add(plan)
        await self.db.commit()
        await self.db.refresh(plan)
        return plan

    async def close_plan(self, plan_id: int) -> None:
        """Mark a plan closed. Closing an already closed or unknown plan is a no-op."""
        await self.db.execute(
            update(Plan)
            .where(Plan.id == plan_id, Plan.closed.is_(False))
            .values(closed=True)
            .execution_options(synchronize_session="fetch")
        )
        await self.db.commit()
