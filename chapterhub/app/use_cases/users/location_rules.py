from typing import Optional
from uuid import UUID

from chapterhub.app.errors import invalid
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.libs.result import Error


async def check_location(
    uow: UnitOfWork, state_id: Optional[UUID], city_id: Optional[UUID]
) -> Optional[Error]:
    """Validation error for an unknown state/city or a city outside its state"""
    if city_id is not None and state_id is None:
        return invalid("A city requires a state")

    if state_id is not None and await uow.locations.get_state(state_id) is None:
        return invalid("Invalid state ID")

    if city_id is not None:
        city = await uow.locations.get_city(city_id)
        if city is None:
            return invalid("Invalid city ID")
        if city.state_id != state_id:
            return invalid("City does not belong to the given state")

    return None
