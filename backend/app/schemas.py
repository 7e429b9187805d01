"""Pydantic request/response schemas used by the API.

Schemas keep API input/output shapes stable and provide validation for
controller handlers and tests.
"""

from pydantic import BaseModel
from typing import Optional


class TutorialCreate(BaseModel):
    """Payload for creating a tutorial.

    A `published` key in the body is accepted but ignored; new tutorials
    always start unpublished.
    """
    title: Optional[str] = None
    description: Optional[str] = None


class TutorialUpdate(BaseModel):
    """Payload for updating a tutorial. All three fields are overwritten."""
    title: Optional[str] = None
    description: Optional[str] = None
    published: bool = False


class TutorialRead(BaseModel):
    """Tutorial representation returned by every endpoint."""
    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    published: bool
