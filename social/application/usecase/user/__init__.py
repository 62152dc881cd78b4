"""User use cases."""

from .create_user import CreateUserRequest, CreateUserResponse, CreateUserUseCase
from .delete_user import DeleteUserRequest, DeleteUserResponse, DeleteUserUseCase
from .get_profile import GetProfileRequest, GetProfileResponse, GetProfileUseCase
from .get_user import GetUserRequest, GetUserResponse, GetUserUseCase
from .list_connections import (
    ConnectionDirection,
    ListConnectionsRequest,
    ListConnectionsResponse,
    ListConnectionsUseCase,
)
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .login import LoginRequest, LoginResponse, LoginUseCase
from .update_user import UpdateUserRequest, UpdateUserResponse, UpdateUserUseCase

__all__ = [
    "ConnectionDirection",
    "CreateUserRequest",
    "CreateUserResponse",
    "CreateUserUseCase",
    "DeleteUserRequest",
    "DeleteUserResponse",
    "DeleteUserUseCase",
    "GetProfileRequest",
    "GetProfileResponse",
    "GetProfileUseCase",
    "GetUserRequest",
    "GetUserResponse",
    "GetUserUseCase",
    "ListConnectionsRequest",
    "ListConnectionsResponse",
    "ListConnectionsUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "UpdateUserRequest",
    "UpdateUserResponse",
    "UpdateUserUseCase",
]
