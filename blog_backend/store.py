import asyncio
import json
import logging
import os
import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from fastapi import Request
from pydantic import ValidationError as SchemaError

from blog_backend.errors import StorageError
from blog_backend.models.document import Document

logger = logging.getLogger("blog.store")


class DocumentStore:
    """The whole datastore: one JSON file holding every user and post.

    Every call reads or rewrites the complete document. Mutations go through
    :meth:`transaction`, which serializes the load-mutate-save cycle behind a
    single lock so concurrent requests cannot overwrite each other's changes.
    """

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)
        self._lock = asyncio.Lock()

    def load(self) -> Document:
        if not self.path.exists():
            logger.info("STORE_INIT path=%s", self.path)
            self.save(Document())
        try:
            raw = self.path.read_text(encoding="utf-8")
            return Document.model_validate(json.loads(raw))
        except (OSError, json.JSONDecodeError, SchemaError) as exc:
            raise StorageError(f"cannot read {self.path}: {exc}") from exc

    def save(self, document: Document) -> None:
        payload = json.dumps(document.model_dump(by_alias=True), indent=2, ensure_ascii=False)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"cannot write {self.path}: {exc}") from exc

    async def read(self) -> Document:
        return await asyncio.get_running_loop().run_in_executor(None, self.load)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Document]:
        loop = asyncio.get_running_loop()
        async with self._lock:
            document = await loop.run_in_executor(None, self.load)
            yield document
            await loop.run_in_executor(None, self.save, document)

    def reset(self) -> None:
        if self.path.exists():
            self.path.unlink()
        self.save(Document())


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store
