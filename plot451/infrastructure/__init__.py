"""
Infrastructure layer.

Implementations of the ports defined in the application layer:

- Persistence (SQLAlchemy and in-memory repositories, ORM mappers)
- Web framework (FastAPI routers and schemas)
- Dependency injection glue

This layer depends on domain and application layers,
but they do not depend on it.
"""
