# newsdesk/models/user.py

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship
from . import Base


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for application users.
    Stores username and hashed password for authentication, and owns the
    ordered list of articles the user has saved.
    """
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=lambda: uuid.uuid4().hex)
    username = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.now)

    saved_articles = relationship(
        "Article",
        back_populates="owner",
        order_by="Article.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )

    @property
    def saved_article_refs(self) -> list[str]:
        return [article.id for article in self.saved_articles]
