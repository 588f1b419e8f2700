# azure_blob.py
"""
Azure Blob Storage backend for uploaded media.

put() returns the public URL plus the blob name, which doubles as the
deletion key stored on the Media row.
"""
import os
import uuid
from dataclasses import dataclass
from urllib.parse import unquote, urlparse

from azure.core.exceptions import AzureError, ResourceNotFoundError
from azure.storage.blob import BlobServiceClient, ContentSettings

import config
from errors import StorageError
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class StoredObject:
     url: str
     delete_key: str


class AzureBlobStore:
     def __init__(self, account: str | None = None, key: str | None = None, container: str | None = None):
          self.account = account or config.AZURE_STORAGE_ACCOUNT
          self.container = container or config.AZURE_STORAGE_CONTAINER
          key = key or config.AZURE_STORAGE_KEY
          if not self.account or not key:
               raise StorageError("Azure storage is not configured")
          self.blob_service = BlobServiceClient.from_connection_string(
               f"DefaultEndpointsProtocol=https;"
               f"AccountName={self.account};"
               f"AccountKey={key};"
               f"EndpointSuffix=core.windows.net"
          )

     def put(self, data, folder: str, filename: str = "", content_type: str | None = None) -> StoredObject:
          ext = os.path.splitext(filename)[1].lower()
          blob_name = f"{folder}/{uuid.uuid4()}{ext}"
          blob_client = self.blob_service.get_blob_client(container=self.container, blob=blob_name)
          try:
               blob_client.upload_blob(
                    data,
                    overwrite=True,
                    content_settings=ContentSettings(content_type=content_type) if content_type else None,
               )
          except AzureError as e:
               raise StorageError(f"Upload failed: {e}") from e
          return StoredObject(url=blob_client.url, delete_key=blob_name)

     def delete(self, delete_key: str) -> None:
          """
          Deletes a blob by name. A blob that is already gone counts as deleted.
          """
          blob_client = self.blob_service.get_blob_client(container=self.container, blob=delete_key)
          try:
               blob_client.delete_blob()
          except ResourceNotFoundError:
               logger.warning("Blob %s already missing, treating as deleted", delete_key)
          except AzureError as e:
               raise StorageError(f"Delete failed: {e}") from e

     def fetch(self, url: str) -> bytes:
          blob_client = self.blob_service.get_blob_client(
               container=self.container, blob=self._blob_name_from_url(url)
          )
          try:
               return blob_client.download_blob().readall()
          except AzureError as e:
               raise StorageError(f"Download failed: {e}") from e

     def _blob_name_from_url(self, blob_url: str) -> str:
          # https://<account>.blob.core.windows.net/<container>/<folder>/<name>
          path = unquote(urlparse(blob_url).path).lstrip("/")
          prefix = f"{self.container}/"
          return path[len(prefix):] if path.startswith(prefix) else path
