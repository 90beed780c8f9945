from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from chapterhub.api.error import raise_for_error
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.app.use_cases.locations import (
    CityResponse,
    ListCitiesUseCase,
    ListStatesUseCase,
    StateResponse,
)
from chapterhub.depends import get_current_actor, get_unit_of_work
from chapterhub.domain.actor import Actor

router = APIRouter(tags=["Locations"])


@router.get("/states", status_code=status.HTTP_200_OK, response_model=List[StateResponse])
async def list_states(
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListStatesUseCase(uow).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/cities", status_code=status.HTTP_200_OK, response_model=List[CityResponse])
async def list_cities(
    state_id: Optional[UUID] = Query(None),
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListCitiesUseCase(uow).execute(state_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
