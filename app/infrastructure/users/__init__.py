"""
Infrastructure adapters for the users bounded context.

Each adapter implements both user repository ports:
- PostgresUserRepository: SQL storage over an async connection pool.
- InMemoryUserRepository: process-local storage for local runs and tests.
"""
