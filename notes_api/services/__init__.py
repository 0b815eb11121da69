# Services package init
"""
Notes API — Services Layer
============================

Service Inventory:
    - NoteService: list / get / create / update / delete against a NoteStore,
      including request-body parsing and validation
"""
