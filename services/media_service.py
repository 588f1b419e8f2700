# services/media_service.py
"""
Media Service - upload, query, update, delete and bulk export of media.

Binary content lives in the object store, metadata in the database. The two
are not covered by one transaction:
- upload stores the blob before committing the row, and deletes the blob
  again if the commit fails;
- delete releases the blob before removing the row, and keeps the row if
  the release fails.
"""
import os
from typing import Iterable, List, Optional
from urllib.parse import urlparse

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session, selectinload

from errors import NotFound, StorageError, ValidationError
from models import Media, MediaTag
from services.access_policy import Action, Actor, authorize, media_resource
from utils.archive import ZipArchive
from utils.logger import get_logger

logger = get_logger(__name__)

MEDIA_FOLDER = "media-gallery"
DEFAULT_EXTENSION = ".jpg"


def _escape_like(value: str) -> str:
     return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def visible_media_query(db: Session, actor: Actor) -> Query:
     """Admins see everything; everyone else sees their own items plus shared ones."""
     query = db.query(Media).options(selectinload(Media.owner), selectinload(Media.tag_rows))
     if not actor.is_admin:
          query = query.filter(or_(Media.user_id == actor.id, Media.is_shared.is_(True)))
     return query


def archive_entry_name(media: Media) -> str:
     title = (media.title or f"media-{media.id}").replace("/", "_").replace("\\", "_").strip()
     ext = os.path.splitext(urlparse(media.image_url).path)[1].lower() or DEFAULT_EXTENSION
     return f"{title}{ext}"


class MediaService:
     """Service class for media-related business logic."""

     @staticmethod
     def upload(
          db: Session,
          store,
          actor: Actor,
          data,
          filename: str,
          content_type: Optional[str],
          title: str,
          description: Optional[str] = None,
          tags: Iterable[str] = (),
          is_shared: bool = False,
     ) -> Media:
          stored = store.put(data, f"{MEDIA_FOLDER}/{actor.id}", filename, content_type)

          media = Media(
               title=title,
               description=description,
               image_url=stored.url,
               storage_key=stored.delete_key,
               user_id=actor.id,
               is_shared=is_shared,
          )
          media.set_tags(tags)
          db.add(media)
          try:
               db.commit()
          except Exception:
               db.rollback()
               logger.warning("Saving media failed, removing uploaded blob %s", stored.delete_key)
               try:
                    store.delete(stored.delete_key)
               except StorageError:
                    logger.exception("Could not remove orphaned blob %s", stored.delete_key)
               raise

          db.refresh(media)
          logger.info("Media %s uploaded by user %s", media.id, actor.id)
          return media

     @staticmethod
     def list_media(
          db: Session,
          actor: Actor,
          search: Optional[str] = None,
          tags: Optional[List[str]] = None,
     ) -> List[Media]:
          query = visible_media_query(db, actor)

          if search:
               query = query.filter(Media.title.ilike(f"%{_escape_like(search)}%", escape="\\"))

          if tags:
               query = query.filter(Media.tag_rows.any(MediaTag.name.in_(tags)))

          return query.order_by(Media.created_at.desc(), Media.id.desc()).all()

     @staticmethod
     def get_media(db: Session, media_id: int) -> Media:
          media = (
               db.query(Media)
               .options(selectinload(Media.owner), selectinload(Media.tag_rows))
               .filter(Media.id == media_id)
               .first()
          )
          if not media:
               raise NotFound("Media not found")
          return media

     @staticmethod
     def get_for_actor(db: Session, actor: Actor, media_id: int) -> Media:
          media = MediaService.get_media(db, media_id)
          authorize(actor, media_resource(media), Action.READ)
          return media

     @staticmethod
     def update(
          db: Session,
          actor: Actor,
          media_id: int,
          title: Optional[str] = None,
          description: Optional[str] = None,
          tags: Optional[List[str]] = None,
          is_shared: Optional[bool] = None,
     ) -> Media:
          media = MediaService.get_media(db, media_id)
          authorize(actor, media_resource(media), Action.UPDATE)

          if title:
               media.title = title
          if description:
               media.description = description
          if tags is not None:
               media.set_tags(tags)
          if is_shared is not None:
               media.is_shared = is_shared

          db.commit()
          db.refresh(media)
          return media

     @staticmethod
     def delete(db: Session, store, actor: Actor, media_id: int) -> None:
          """
          Raises:
               NotFound: no such media
               NotAuthorized: actor is neither owner nor admin
               StorageError: the blob could not be released; the row is kept
          """
          media = MediaService.get_media(db, media_id)
          authorize(actor, media_resource(media), Action.DELETE)

          store.delete(media.storage_key)
          db.delete(media)
          db.commit()
          logger.info("Media %s deleted by user %s", media_id, actor.id)

     @staticmethod
     def bulk_download(db: Session, store, actor: Actor, media_ids: List[int]) -> ZipArchive:
          """
          Zip every requested item the actor can see. Items outside the
          actor's visibility are skipped silently.

          Returns the finalized archive; the caller streams it and closes it.
          """
          if not media_ids:
               raise ValidationError("Please select media to download")

          items = (
               visible_media_query(db, actor)
               .filter(Media.id.in_(set(media_ids)))
               .order_by(Media.created_at.desc(), Media.id.desc())
               .all()
          )
          if not items:
               raise NotFound("No media found")

          archive = ZipArchive()
          try:
               for item in items:
                    archive.append(store.fetch(item.image_url), archive_entry_name(item))
               archive.finalize()
          except Exception:
               archive.close()
               raise
          logger.info("User %s downloaded %d media items", actor.id, len(items))
          return archive
