# newsdesk/models/article.py

import uuid
from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from . import Base


# -------------------------------
# Saved Article Model
# -------------------------------

class Article(Base):
    """
    Snapshot of an upstream article taken when a user saves it.
    Never synced with the provider afterwards.
    """
    __tablename__ = "articles"

    id = Column(String(32), primary_key=True, default=lambda: uuid.uuid4().hex)
    owner_id = Column(String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)

    title = Column(String)
    description = Column(Text)
    img_url = Column(String)
    url = Column(String, nullable=False)
    source = Column(String)
    author = Column(String)
    published_at = Column(String)
    saved_at = Column(DateTime, default=datetime.now)

    owner = relationship("User", back_populates="saved_articles")

    __table_args__ = (
        UniqueConstraint("owner_id", "url", name="uq_article_owner_url"),
    )

    def __repr__(self):
        return f"<Article(id={self.id}, owner_id={self.owner_id}, url={self.url})>"
