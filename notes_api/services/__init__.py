# Services package init
"""
Notes API: Services Layer
===========================

What:  Note rules and the simulated database, sitting between routes (HTTP)
       and the NoteStore (state).
How:   Services take a NoteStore in their constructor and are injected into
       routes through FastAPI dependencies. They raise AppError subclasses
       and never build HTTP responses.

Service Inventory:
    - NoteService: list, lookup and create with field validation
    - NoteDatabase: lookup behind an artificial delay; raises a plain
      RecordNotFoundError (not an AppError) on a miss
"""
