"""
User Management Use Cases
"""

from .activate_user_use_case import ActivateUserUseCase
from .assign_role_use_case import AssignRoleUseCase
from .deactivate_user_use_case import DeactivateUserUseCase
from .dtos import (
    LocationUpdatedResponse,
    RoleAssignedResponse,
    UserListResponse,
    UserResponse,
    UserStatusResponse,
)
from .list_users_use_case import ListUsersUseCase
from .search_addable_users_use_case import SearchAddableUsersUseCase
from .toggle_verification_use_case import ToggleVerificationUseCase
from .update_location_use_case import UpdateLocationUseCase

__all__ = [
    "ActivateUserUseCase",
    "AssignRoleUseCase",
    "DeactivateUserUseCase",
    "ListUsersUseCase",
    "SearchAddableUsersUseCase",
    "ToggleVerificationUseCase",
    "UpdateLocationUseCase",
    "LocationUpdatedResponse",
    "RoleAssignedResponse",
    "UserListResponse",
    "UserResponse",
    "UserStatusResponse",
]
