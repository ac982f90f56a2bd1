from .sql_database import SqlDatabase

__all__ = ["SqlDatabase"]
