"""Product catalog service.

A FastAPI application exposing CRUD endpoints and a searchable, sortable,
paginated listing over a single Product entity stored with SQLModel.
"""

__version__ = "0.1.0"
