from sqlalchemy import Column, String, Boolean, text
from sqlalchemy.orm import relationship
from user_registry.db.base import Base


class Manager(Base):
    __tablename__ = "managers"

    manager_id = Column(String(36), primary_key=True)
    is_active = Column(Boolean, nullable=False, default=True, server_default=text("true"))

    users = relationship("User", back_populates="manager")

    def __repr__(self):
        return f"<Manager(id={self.manager_id}, active={self.is_active})>"
