"""SQLAlchemy model for persisted push notifications."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from pushgate.infrastructure.database import Base


class NotificationModel(Base):
    """Database representation of a notification and its delivery state."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    device_id = Column(Integer, ForeignKey("device.id"), nullable=False, index=True)
    alert = Column(String(150), nullable=True)
    badge = Column(Integer, nullable=True)
    # A file name, or ``true`` for the default sound.
    sound = Column(JSON, nullable=True)
    custom_properties = Column(JSON, nullable=True)
    sent_at = Column(DateTime, nullable=True, index=True)
    error_code = Column(Integer, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())

    device = relationship("DeviceModel", lazy="joined")


__all__ = ["NotificationModel"]
