# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from lifelogix.models.database import Base
from lifelogix.utils.encryption import EncryptedText  # 🔐 Encryption utils


class JournalEntry(Base):
    __tablename__ = "journal_entries"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    title = Column(EncryptedText, nullable=False)  # 🔐 Encrypted
    text = Column(EncryptedText, nullable=False)   # 🔐 Encrypted

    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="journal_entries")

    def to_dict(self):
        return {
            "id": self.id,
            "ownerId": self.user_id,
            "title": self.title,
            "text": self.text,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
