"""
Engine settings repository.

Handles the single persisted EngineSettings row.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.settings import EngineSettings


class EngineSettingsRepository:
    """Repository for the EngineSettings row."""

    def __init__(self, session: Session):
        self.session = session

    def get(self) -> Optional[EngineSettings]:
        statement = select(EngineSettings).order_by(EngineSettings.id).limit(1)
        return self.session.exec(statement).first()

    def save(self, entry: EngineSettings) -> EngineSettings:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry
