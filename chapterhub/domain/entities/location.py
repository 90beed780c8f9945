"""
State and City Entities

Reference data every chapter and director is anchored to.
"""

from uuid import UUID, uuid4

from sqlmodel import Field, Index, SQLModel


class State(SQLModel, table=True):
    __tablename__ = "states"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100, unique=True)
    code: str = Field(max_length=10, unique=True)


class City(SQLModel, table=True):
    """
    City entity - always belongs to exactly one state.
    """

    __tablename__ = "cities"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    state_id: UUID = Field(foreign_key="states.id", nullable=False, index=True)

    __table_args__ = (Index("idx_city_state_name", "state_id", "name", unique=True),)
