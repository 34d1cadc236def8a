"""Book catalog HTTP API.

A FastAPI service exposing CRUD endpoints over a single ``books`` table
stored in SQLite through SQLModel.
"""

__version__ = "0.1.0"
