# models/media.py
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import Base, utcnow


class Media(Base):
     """
     Media model - metadata for an uploaded image.

     The binary lives in blob storage: image_url is where it is served from and
     storage_key is what deletes it. Both are required, so a row only exists
     for content that was stored successfully.
     """
     __tablename__ = "media"

     id = Column(Integer, primary_key=True, autoincrement=True)
     title = Column(String(255), nullable=False)
     description = Column(Text, nullable=True)
     image_url = Column(String(1000), nullable=False)
     storage_key = Column(String(500), nullable=False)
     user_id = Column(
          Integer,
          ForeignKey("users.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )
     is_shared = Column(Boolean, default=False, nullable=False, index=True)
     created_at = Column(DateTime, default=utcnow, nullable=False, index=True)

     # Relationships
     owner = relationship("User", back_populates="media")
     tag_rows = relationship(
          "MediaTag",
          back_populates="media",
          cascade="all, delete-orphan",
          order_by="MediaTag.id",
     )

     def __repr__(self):
          return f"<Media(id={self.id}, title='{self.title}', user_id={self.user_id}, is_shared={self.is_shared})>"

     @property
     def tags(self) -> list[str]:
          return [t.name for t in self.tag_rows]

     def set_tags(self, tags) -> None:
          """Replace tags, keeping first-seen order and dropping duplicates."""
          wanted = list(dict.fromkeys(tags))
          existing = {t.name: t for t in self.tag_rows}
          self.tag_rows = [existing.get(name) or MediaTag(name=name) for name in wanted]


class MediaTag(Base):
     __tablename__ = "media_tags"
     __table_args__ = (UniqueConstraint("media_id", "name", name="uq_media_tags_media_name"),)

     id = Column(Integer, primary_key=True, autoincrement=True)
     media_id = Column(
          Integer,
          ForeignKey("media.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )
     name = Column(String(100), nullable=False, index=True)

     media = relationship("Media", back_populates="tag_rows")
