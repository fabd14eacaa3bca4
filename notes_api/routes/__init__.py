"""
Notes API: Routes Package
===========================

Route Inventory:
    - hello.py:     GET  /hello
    - notes.py:     GET  /notes, POST /notes, GET /notes/{id},
                    GET  /notes/async-notes/{id}, GET /notes/async-notes-safe/{id}
    - faults.py:    GET  /error, GET /crash
    - fallback.py:  every other path and method (not-found interceptor, mounted last)

Routes stay thin: they call a service and return its result, or let an
AppError propagate to the error chain.
"""
