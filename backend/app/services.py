"""Business logic used by the HTTP controllers.

`TutorialService` coordinates the repository for the two write paths
that carry a rule of their own: creation always starts unpublished, and
an update overwrites every mutable field of an existing row.
"""

import logging
from typing import Optional
from sqlmodel import Session
from . import models, repositories
from .schemas import TutorialCreate, TutorialUpdate

logger = logging.getLogger("app.services")


class TutorialService:
    """Create and update tutorials through a `TutorialRepository`."""
    def __init__(self, session: Session, repo: Optional[repositories.TutorialRepository] = None):
        self.session = session
        self.repo = repo or repositories.TutorialRepository(session)

    def create(self, payload: TutorialCreate) -> models.Tutorial:
        """Persist a new tutorial from `payload` with `published=False`."""
        tutorial = models.Tutorial(title=payload.title, description=payload.description, published=False)
        tutorial = self.repo.save(tutorial)
        logger.info("created tutorial %s", tutorial.id)
        return tutorial

    def update(self, tutorial_id: int, payload: TutorialUpdate) -> Optional[models.Tutorial]:
        """Overwrite title, description and published on an existing tutorial.

        Returns `None` if no tutorial has `tutorial_id`.
        """
        tutorial = self.repo.find_by_id(tutorial_id)
        if tutorial is None:
            return None
        tutorial.title = payload.title
        tutorial.description = payload.description
        tutorial.published = payload.published
        tutorial = self.repo.save(tutorial)
        logger.info("updated tutorial %s", tutorial.id)
        return tutorial
