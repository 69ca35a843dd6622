"""Plan routes."""

from fastapi import APIRouter, status

from mealplan_admin.api.deps import PlanServiceDep
from mealplan_admin.schemas.plans import PlanCreate, PlanRead

router = APIRouter(prefix="/plans", tags=["plans"])


@router.get("/", response_model=list[PlanRead])
async def list_plans(
    service: PlanServiceDep,
    include_closed: bool = False,
) -> list[PlanRead]:
    """
    List plans, oldest start date first.

    Filters:
    - include_closed: Also return plans that were closed
    """
    return await service.list_plans(include_closed)


@router.post("/", response_model=PlanRead, status_code=status.HTTP_201_CREATED)
async def create_plan(
    data: PlanCreate,
    service: PlanServiceDep,
) -> PlanRead:
    """
    Create a new plan.

    Expired open plans are closed first. Returns 409 if another plan is
    already waiting to start.
    """
    return await service.create(data)


@router.get("/{plan_id}", response_model=PlanRead)
async def get_plan(
    plan_id: int,
    service: PlanServiceDep,
) -> PlanRead:
    """Get a specific plan by ID."""
    return await service.get_plan(plan_id)


@router.post("/{plan_id}/close", response_model=PlanRead)
async def close_plan(
    plan_id: int,
    service: PlanServiceDep,
) -> PlanRead:
    """Close a plan. Closing an already closed plan returns it unchanged."""
    return await service.close_plan(plan_id)
