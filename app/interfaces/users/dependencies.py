"""
Dependency injection for the users bounded context.

Resolves use cases from the Container stored on the application
state. The Container itself is built in app.main.
"""

from fastapi import Depends, Request

from app.application.users.create_user import CreateUserUseCase
from app.application.users.get_user import GetUserUseCase
from app.core.container import Container


def get_container(request: Request) -> Container:
    """Return the application's shared Container."""
    return request.app.state.container


def get_create_user_use_case(
    container: Container = Depends(get_container),
) -> CreateUserUseCase:
    """Return the create-user command handler."""
    return container.create_user_command


def get_get_user_use_case(
    container: Container = Depends(get_container),
) -> GetUserUseCase:
    """Return the get-user query handler."""
    return container.get_user_query
