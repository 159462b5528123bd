# Routes package init
"""
Notes API: API Routes Package
===============================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - notes.py:   GET/POST /notes, GET/PUT/DELETE /notes/{id}
    - root.py:    GET /          (service metadata)
    - health.py:  GET /health    (service health check)

Routes are thin: they pull data out of the request, call NoteService, and
pick the status code and envelope. Rules live in the services package.
"""
