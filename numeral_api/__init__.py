"""
Numeral API: Roman ↔ Arabic numeral conversion over HTTP.

Application package root. A small modular monolith with the usual
layering:

Bounded contexts:
    - conversion: Roman ↔ Arabic numeral conversion, single and batch.

Layers:
    - domain: Pure conversion functions, direction detection, errors.
    - application: Use cases and DTOs.
    - interfaces: FastAPI routers, Pydantic schemas, dependencies.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
