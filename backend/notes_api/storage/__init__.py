# Storage package init
"""
Notes API: Storage Layer
==========================

What:  Owns note state. Currently a single in-memory implementation.

Store Inventory:
    - NoteStore: insertion-ordered, lock-guarded map of id → Note with a
      monotonic id counter. Process-local; contents vanish on restart.
"""
