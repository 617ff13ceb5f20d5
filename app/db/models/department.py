from sqlalchemy import Column, Integer, String

from app.core.constants import (
    DEPARTMENT_DESCRIPTION_MAX_LENGTH,
    DEPARTMENT_NAME_MAX_LENGTH,
)
from app.db.base import Base


class Department(Base):
    __tablename__ = "departments"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(DEPARTMENT_NAME_MAX_LENGTH), nullable=False, unique=True)

    description = Column(String(DEPARTMENT_DESCRIPTION_MAX_LENGTH), nullable=True)

    def __repr__(self) -> str:
        return f"Department(id={self.id!r}, name={self.name!r})"
