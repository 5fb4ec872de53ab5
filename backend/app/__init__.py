"""
Todo API — Application Package Initializer
===========================================

What: Marks the `app` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    Requests travel through four layers, each with its own error vocabulary:

    ┌─────────────────────────────────────┐
    │        Router (app.routes)          │  ← (method, path) → handler table
    ├─────────────────────────────────────┤
    │     Handlers (app.routes.todos)     │  ← status codes, JSON envelope
    ├─────────────────────────────────────┤
    │   Service (app.services)            │  ← business rules, domain reasons
    ├─────────────────────────────────────┤
    │   Gateway (app.repositories)        │  ← SQL against the `todo` table
    └─────────────────────────────────────┘

    Raw store failures (PersistenceError) are classified by the service into
    DomainError subclasses; handlers turn those into HTTP responses.
"""

__version__ = "1.0.0"
