"""SQLModel data models.

The API manages a single table, `tutorials`. There are no relationships
to other tables.
"""

from typing import Optional
from sqlmodel import SQLModel, Field


class Tutorial(SQLModel, table=True):
    """A tutorial entry.

    Fields:
    - `id`: primary key assigned by the database, never changed afterwards
    - `title`: free text; not enforced non-null
    - `description`: optional free text
    - `published`: publication flag, `False` on creation
    """
    __tablename__ = "tutorials"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: Optional[str] = None
    description: Optional[str] = None
    published: bool = Field(default=False, nullable=False)
