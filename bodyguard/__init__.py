"""
Bodyguard — uniform error responses for JSON request bodies.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - decoding: JSON body decoding and error normalization.
    - accounts: Sign-up input validation.
    - files: Stored document downloads.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (request bodies, filesystem) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
