# Services package init
"""
Notes API: Services Layer
===========================

What:  Request-handling logic sitting between routes (HTTP) and the store.
How:   Services receive decoded request data, apply the note rules, and
       return domain objects or raise application exceptions.

Service Inventory:
    - NoteValidator (abstract): Interface for request-body validation
    - ManualNoteValidator / SchemaNoteValidator: the two interchangeable strategies
    - NoteService: validate → store → not-found mapping for every /notes operation
"""
