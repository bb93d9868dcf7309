"""
Composition root for the users bounded context.

Holds one write repository, one read repository and the two use cases
built on them. Built once per application and shared read-only by
every request.
"""

from typing import Generic, TypeVar

from app.application.users.create_user import CreateUserUseCase
from app.application.users.get_user import GetUserUseCase
from app.domain.users.ports import UserReadRepository, UserWriteRepository

W = TypeVar("W", bound=UserWriteRepository)
R = TypeVar("R", bound=UserReadRepository)


class Container(Generic[W, R]):
    """Wires repositories into use cases via constructor injection.

    Generic over the concrete repository types so the HTTP layer can be
    exercised against any implementation of the ports.

    Attributes:
        write_repo: Repository used by the create-user command.
        read_repo: Repository used by the get-user query.
        create_user_command: The create-user use case.
        get_user_query: The get-user use case.
    """

    __slots__ = ("write_repo", "read_repo", "create_user_command", "get_user_query")

    def __init__(self, write_repo: W, read_repo: R) -> None:
        self.write_repo = write_repo
        self.read_repo = read_repo
        self.create_user_command = CreateUserUseCase(user_repo=write_repo)
        self.get_user_query = GetUserUseCase(user_repo=read_repo)
