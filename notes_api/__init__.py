"""
Notes API — Application Package Initializer
=============================================

What: A small CRUD HTTP API for short text notes held in process memory.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Body parsing, validation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Note dataclass + Pydantic
    ├─────────────────────────────────────┤
    │          Store (In-Memory)          │  ← Ordered list + id counter
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
