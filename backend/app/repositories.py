"""Repository encapsulating database operations on tutorials.

`TutorialRepository` is the only data-access object in the application.
It returns SQLModel objects and commits/refreshes on every write so a
response is never produced before the change is durable.
"""

import logging
from typing import List, Optional
from sqlmodel import Session, col, select
from sqlalchemy import delete
from . import models

logger = logging.getLogger("app.repositories")


class TutorialRepository:
    """CRUD operations for `Tutorial` objects plus two derived lookups."""
    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> List[models.Tutorial]:
        """Return every tutorial ordered by id."""
        stmt = select(models.Tutorial).order_by(models.Tutorial.id)
        return list(self.session.exec(stmt).all())

    def find_by_id(self, tutorial_id: int) -> Optional[models.Tutorial]:
        """Get a `Tutorial` by primary key or `None` if not found."""
        return self.session.get(models.Tutorial, tutorial_id)

    def save(self, tutorial: models.Tutorial) -> models.Tutorial:
        """Insert `tutorial` when it has no id, otherwise update the stored row.

        Returns the managed instance refreshed from the database.
        """
        if tutorial.id is None:
            self.session.add(tutorial)
        else:
            tutorial = self.session.merge(tutorial)
        self.session.commit()
        self.session.refresh(tutorial)
        return tutorial

    def delete_by_id(self, tutorial_id: int) -> None:
        """Delete the tutorial with `tutorial_id`; an unknown id is a no-op."""
        tutorial = self.session.get(models.Tutorial, tutorial_id)
        if tutorial is None:
            logger.debug("delete of unknown tutorial %s ignored", tutorial_id)
            return
        self.session.delete(tutorial)
        self.session.commit()

    def delete_all(self) -> None:
        """Remove every tutorial in a single statement."""
        self.session.exec(delete(models.Tutorial))
        self.session.commit()

    def find_by_published(self, published: bool) -> List[models.Tutorial]:
        """Return tutorials whose `published` flag equals `published`."""
        stmt = select(models.Tutorial).where(models.Tutorial.published == published).order_by(models.Tutorial.id)
        return list(self.session.exec(stmt).all())

    def find_by_title_containing(self, title: str) -> List[models.Tutorial]:
        """Return tutorials whose title contains `title`, ignoring case.

        An empty `title` matches every row, including rows without a title.
        LIKE wildcards in `title` are matched literally.
        """
        if not title:
            return self.find_all()
        stmt = (
            select(models.Tutorial)
            .where(col(models.Tutorial.title).icontains(title, autoescape=True))
            .order_by(models.Tutorial.id)
        )
        return list(self.session.exec(stmt).all())
