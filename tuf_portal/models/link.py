from sqlalchemy import Column, String, DateTime, Text
import uuid

from tuf_portal.db import Base
from tuf_portal.utils.datetime import naive_utc_now


class Link(Base):
    __tablename__ = "links"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    label = Column(String, nullable=False)
    url = Column(String, nullable=False)
    # "group" is reserved in SQL; SQLAlchemy quotes it
    group = Column(String, nullable=False, index=True)  # SSN, IEEE, ACM, Dept, Alumni, Social, Flagship
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=naive_utc_now)
