"""
Application layer for the users bounded context.

One command (create a user) and one query (get a user by id).
No framework or infrastructure imports allowed.
"""
