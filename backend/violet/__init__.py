"""
Violet API Backend - Application Package Initializer
====================================================

What: Marks the `violet` directory as a Python package.
Why:  Enables module imports like `from violet.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend is layered around the route registry:

    ┌─────────────────────────────────────┐
    │      API (versioned domains)        │  ← handlers returning Outcomes
    ├─────────────────────────────────────┤
    │      Routing (registry)             │  ← router → gateway → node
    ├─────────────────────────────────────┤
    │      Core (Outcome envelope)        │  ← Success / Failure
    ├─────────────────────────────────────┤
    │      FastAPI / Starlette            │  ← transport
    └─────────────────────────────────────┘

    Handlers never talk to FastAPI directly. They are registered through the
    routing package, which guarantees a collision-free route table before the
    server accepts its first request.
"""

__version__ = "1.0.0"
