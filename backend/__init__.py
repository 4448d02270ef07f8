"""
Epic Memes Backend Support

Layer-neutral building blocks shared by ingestion and frontend.

LAYER STRUCTURE:
================

1. CONTRACTS (contracts/)
   - Responsibility: Error, Result and Timestamp value types
   - MUST NOT: Perform I/O or hold state

2. OBSERVABILITY (observability/)
   - Responsibility: Developer-facing logging and append-only audit trail
   - MUST NOT: Influence behavior of the layers it observes
"""
