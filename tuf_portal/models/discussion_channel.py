from sqlalchemy import Column, String, DateTime, JSON
import uuid

from tuf_portal.db import Base
from tuf_portal.utils.datetime import naive_utc_now


class DiscussionChannel(Base):
    __tablename__ = "discussions_channels"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    label = Column(String, nullable=False)
    platform = Column(String, nullable=False, index=True)  # WhatsApp, Discord, Telegram
    url = Column(String, nullable=False)
    topic_tags = Column(JSON, nullable=True)
    created_at = Column(DateTime, default=naive_utc_now)
