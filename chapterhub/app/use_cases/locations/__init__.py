from .list_locations_use_case import (
    CityResponse,
    ListCitiesUseCase,
    ListStatesUseCase,
    StateResponse,
)

__all__ = ["CityResponse", "ListCitiesUseCase", "ListStatesUseCase", "StateResponse"]
