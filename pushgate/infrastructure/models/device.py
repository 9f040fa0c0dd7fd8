"""SQLAlchemy model for the device table."""

from sqlalchemy import Column, DateTime, Integer, String, func

from pushgate.infrastructure.database import Base


class DeviceModel(Base):
    """Database representation of a device able to receive notifications."""

    __tablename__ = "device"

    id = Column(Integer, primary_key=True, index=True)
    token = Column(String(200), nullable=False, unique=True, index=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    last_registered_at = Column(DateTime, nullable=True)


__all__ = ["DeviceModel"]
