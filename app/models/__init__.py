# Import every model so Base.metadata is complete for Alembic autogenerate.
from app.models.user import User, users_table  # noqa: F401
