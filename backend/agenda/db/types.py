"""Column types that work on both PostgreSQL and SQLite."""
from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB

JSONBCompat = JSON().with_variant(JSONB(), "postgresql")
