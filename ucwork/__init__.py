"""
ucwork: members and orders HTTP service.

Application package root. A small service using hexagonal
architecture (ports & adapters).

Layers:
    - domain: Entities, store ports (ABCs), error taxonomy.
    - infrastructure: Store adapters (Cloud Datastore, Cloud SQL).
    - interfaces: FastAPI routers, Pydantic schemas, converters, fallible handlers.
    - shared: Cross-cutting concerns (errors, dispatch, security, logging).
"""
