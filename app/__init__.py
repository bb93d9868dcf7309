"""
UserService: a minimal HTTP service for creating and reading users.

Application package root. Hexagonal architecture (ports & adapters).

Bounded contexts:
    - users: create a user, get a user by id.

Layers:
    - domain: Entities, ports (ABCs), errors.
    - application: Use cases (one command, one query) and DTOs.
    - infrastructure: Storage adapters implementing domain ports.
    - interfaces: FastAPI router, Pydantic schemas.
    - core: Settings and the Container composition root.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
