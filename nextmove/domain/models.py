from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.sql import func
from nextmove.db.base import Base


class SystemSetting(Base):
    __tablename__ = "system_settings"
    key = Column(String(64), primary_key=True)
    value = Column(JSON)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)
