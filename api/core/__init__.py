"""
Core utilities shared across the initiatives API.

This package hosts configuration (env vars, data file paths) and the
logging setup. Routers and services depend on these primitives instead
of reading os.environ or configuring handlers themselves.
"""
