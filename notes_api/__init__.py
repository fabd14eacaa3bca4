"""
Notes API: Application Package
================================

What: A small FastAPI service that serves an in-memory list of notes and shows
      how route handlers, a not-found interceptor and one centralized error
      handler share the error path.
Who:  Imported by uvicorn (`notes_api.main:app`), by `python -m notes_api`
      and by the pytest suite.

Architecture Note:

    ┌─────────────────────────────────────┐
    │   Middleware (request ID, access)   │
    ├─────────────────────────────────────┤
    │   Routes → Not-Found Interceptor    │  ← request stages, in order
    ├─────────────────────────────────────┤
    │   Error Chain → Error Envelope      │  ← delegated errors only
    ├─────────────────────────────────────┤
    │   Services (NoteService, NoteDB)    │
    ├─────────────────────────────────────┤
    │   NoteStore (in-memory, per app)    │
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
