# routers/media.py
"""
Media API routes.

Visibility:
- Admin: every item
- User: own items plus items shared by others (shared items are read-only)
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session
from starlette.background import BackgroundTask

import config
from database import get_session
from dependencies import get_current_actor, get_object_store
from errors import ValidationError
from schemas import (
     BulkDownloadRequest,
     MediaResponse,
     MediaUpdate,
     MessageResponse,
     parse_boolish,
     parse_tags,
)
from services import Actor, MediaService

router = APIRouter(prefix="/api/media", tags=["media"])


@router.post(
     "",
     response_model=MediaResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Upload an image"
)
def upload_media(
     image: Optional[UploadFile] = File(None),
     title: str = Form(...),
     description: Optional[str] = Form(None),
     tags: Optional[str] = Form(None),
     isShared: Optional[str] = Form(None),
     db: Session = Depends(get_session),
     store=Depends(get_object_store),
     actor: Actor = Depends(get_current_actor),
):
     """
     Multipart upload.

     - **image**: the file (images only)
     - **tags**: comma-separated, e.g. "beach,summer"
     - **isShared**: "true" to make the item visible to every user
     """
     try:
          if image is None or not image.filename:
               raise ValidationError("Please upload a file")
          if image.content_type and not image.content_type.startswith("image/"):
               raise ValidationError("Only image files are allowed")
          if image.size is not None and image.size > config.MAX_UPLOAD_MB * 1024 * 1024:
               raise ValidationError(f"File too large (max {config.MAX_UPLOAD_MB}MB)")

          media = MediaService.upload(
               db,
               store,
               actor,
               image.file,
               image.filename,
               image.content_type,
               title=title,
               description=description,
               tags=parse_tags(tags),
               is_shared=parse_boolish(isShared) or False,
          )
          return MediaResponse.model_validate(media)
     finally:
          if image is not None:
               image.file.close()


@router.get("", response_model=List[MediaResponse], summary="List visible media")
def list_media(
     search: Optional[str] = Query(None, description="Case-insensitive match on title"),
     tags: Optional[str] = Query(None, description="Comma-separated; any tag matches"),
     db: Session = Depends(get_session),
     actor: Actor = Depends(get_current_actor),
):
     items = MediaService.list_media(db, actor, search=search, tags=parse_tags(tags))
     return [MediaResponse.model_validate(m) for m in items]


@router.post("/download", summary="Download several items as a ZIP archive")
def download_media(
     body: BulkDownloadRequest,
     db: Session = Depends(get_session),
     store=Depends(get_object_store),
     actor: Actor = Depends(get_current_actor),
):
     archive = MediaService.bulk_download(db, store, actor, body.media_ids)
     return StreamingResponse(
          archive.iter_chunks(),
          media_type="application/zip",
          headers={"Content-Disposition": 'attachment; filename="media-gallery.zip"'},
          background=BackgroundTask(archive.close),
     )


@router.get("/{media_id}", response_model=MediaResponse)
def get_single_media(
     media_id: int,
     db: Session = Depends(get_session),
     actor: Actor = Depends(get_current_actor),
):
     return MediaResponse.model_validate(MediaService.get_for_actor(db, actor, media_id))


@router.put("/{media_id}", response_model=MediaResponse)
def update_media(
     media_id: int,
     body: MediaUpdate,
     db: Session = Depends(get_session),
     actor: Actor = Depends(get_current_actor),
):
     media = MediaService.update(
          db,
          actor,
          media_id,
          title=body.title,
          description=body.description,
          tags=body.tags,
          is_shared=body.is_shared,
     )
     return MediaResponse.model_validate(media)


@router.delete("/{media_id}", response_model=MessageResponse)
def delete_media(
     media_id: int,
     db: Session = Depends(get_session),
     store=Depends(get_object_store),
     actor: Actor = Depends(get_current_actor),
):
     MediaService.delete(db, store, actor, media_id)
     return MessageResponse(message="Media removed")
