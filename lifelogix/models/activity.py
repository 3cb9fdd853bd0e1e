# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from lifelogix.models.database import Base
from lifelogix.utils.encryption import EncryptedText  # 🔐


class Activity(Base):
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    activity_name = Column(String, nullable=False)
    duration_minutes = Column(Integer, nullable=False, default=0)
    quality = Column(Integer, nullable=True)  # 1..5
    details = Column(EncryptedText, nullable=True)  # 🔐

    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="activities")

    def to_dict(self):
        return {
            "id": self.id,
            "ownerId": self.user_id,
            "activityName": self.activity_name,
            "durationMinutes": self.duration_minutes,
            "quality": self.quality,
            "details": self.details,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<Activity id={self.id} name={self.activity_name} minutes={self.duration_minutes}>"
