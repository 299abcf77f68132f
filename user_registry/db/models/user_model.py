from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, func, text
from sqlalchemy.orm import relationship
from user_registry.db.base import Base


class User(Base):
    __tablename__ = "users"

    user_id = Column(String(36), primary_key=True)
    full_name = Column(String, nullable=False)
    mob_num = Column(String(10), nullable=False, index=True, doc="10 digits, no country prefix")
    pan_num = Column(String(10), nullable=False)
    manager_id = Column(String(36), ForeignKey("managers.manager_id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())
    is_active = Column(Boolean, nullable=False, default=True, server_default=text("true"))

    manager = relationship("Manager", back_populates="users")
