"""Pydantic Schemas: request/response contracts for the /v1 endpoints.

Invariants:
    - Schemas validate at the system boundary (request bodies, responses)
    - Wire format is camelCase; Python attributes stay snake_case

Design Decisions:
    - Separate from core dataclasses: schemas are API contracts, the catalog
      is domain data
"""
