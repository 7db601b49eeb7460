from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, String, func
from sqlalchemy.orm import Mapped, mapped_column, registry

table_registry = registry()
shared_registry = registry()


@table_registry.mapped_as_dataclass
class DirectorDocument:
    """A document of the `directors` collection, kept in its raw shape"""

    __tablename__ = "directors"

    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    data: Mapped[dict[str, Any]] = mapped_column(JSON, default_factory=dict)


@table_registry.mapped_as_dataclass
class UserDocument:
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    data: Mapped[dict[str, Any]] = mapped_column(JSON, default_factory=dict)
    created_at: Mapped[datetime] = mapped_column(init=False, server_default=func.now())


@shared_registry.mapped_as_dataclass
class SharedDefault:
    __tablename__ = "shared_defaults"

    suite: Mapped[str] = mapped_column(String(128), primary_key=True)
    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
