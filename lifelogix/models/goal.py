# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from datetime import datetime
from lifelogix.models.database import Base
from lifelogix.utils.encryption import EncryptedText  # 🔐 Encryption utils
from lifelogix.services.goal_progress_service import compute_overall_progress


class Goal(Base):
    __tablename__ = "goals"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    goal_name = Column(String, nullable=False)
    description = Column(EncryptedText, nullable=True)  # 🔐 Encrypted
    target_date = Column(Date, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Ordered list of sub-goal dicts; lives and dies with the goal row.
    # Always reassign a new list: in-place edits are not change-tracked.
    sub_goals = Column(JSON, nullable=False, default=list)

    user = relationship("User", back_populates="goals")

    @property
    def overall_progress(self) -> int:
        return compute_overall_progress(self.sub_goals)

    def to_dict(self):
        return {
            "id": self.id,
            "ownerId": self.user_id,
            "goalName": self.goal_name,
            "description": self.description,
            "targetDate": self.target_date.isoformat() if self.target_date else None,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "subGoals": [dict(sg) for sg in (self.sub_goals or [])],
            "overallProgress": self.overall_progress,
        }

    def __repr__(self):
        return f"<Goal id={self.id} sub_goals={len(self.sub_goals or [])} progress={self.overall_progress}%>"
