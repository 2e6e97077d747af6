"""
FastAPI routers grouped by record type (initiatives, users).

Each file inside this package exposes an APIRouter that is included in the
application built by api.app.create_app.
"""
