"""SQLAlchemy declarative base and models."""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all DB models."""
    pass


# Register every mapped class so string relationship targets resolve.
from models.user import User  # noqa: E402,F401
from models.zone import Zone  # noqa: E402,F401
from models.yard import Yard  # noqa: E402,F401
from models.status_group import StatusGroup  # noqa: E402,F401
from models.status import Status  # noqa: E402,F401
from models.moto import Moto  # noqa: E402,F401
