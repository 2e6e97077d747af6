"""
High-level use cases for the initiatives API.

Each service module orchestrates the JSON store to implement the record
rules (required fields, duplicate emails, organizer assignment). Routers
call these services instead of touching the data files directly.
"""
