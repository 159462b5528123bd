"""
Notes API: Application Package Initializer
============================================

What: Marks the `notes_api` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Validation + Handling)  │  ← Rules, not-found mapping
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Dataclasses + Pydantic
    ├─────────────────────────────────────┤
    │        Storage (In-Memory)          │  ← NoteStore, owns ids
    └─────────────────────────────────────┘

    Routes set status codes and envelopes, services decide what is valid,
    the store decides ids and timestamps. Each layer is testable on its own.
"""

__version__ = "1.0.0"
