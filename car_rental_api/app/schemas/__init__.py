"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the SQL in the service layer so the
wire representation (camelCase) is decoupled from column names.
"""
