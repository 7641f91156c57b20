"""Mini README: Interactive interfaces for VIP Finance.

Exports the FastAPI application factory serving the REST API consumed by
the dashboard front end.
"""

from .web_app import create_application

__all__ = ["create_application"]
