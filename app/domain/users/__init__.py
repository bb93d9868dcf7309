"""
Users bounded context: domain layer.

Holds the User entity, the error taxonomy shared by the command and
query sides, and the repository ports that storage adapters implement.
"""
