"""Contact form submissions, stored as JSON objects in the media store."""

import asyncio
import json
import logging
import math

from sitecms.application.interfaces import MediaStore
from sitecms.application.schemas import FormResponseCreate, Pagination
from sitecms.domain.entities import FormResponse

logger = logging.getLogger(__name__)

PREFIX = "form-responses/"


class FormResponseService:
    """Saves and pages through contact form responses."""

    def __init__(self, store: MediaStore):
        self._store = store

    async def submit(
        self,
        data: FormResponseCreate,
        ip: str | None = None,
        user_agent: str | None = None,
    ) -> FormResponse:
        response = FormResponse(
            nombre=data.nombre,
            email=str(data.email),
            mensaje=data.mensaje,
            empresa=data.empresa,
            telefono=data.telefono,
            producto=data.producto,
            ip=ip,
            user_agent=user_agent,
        )
        payload = json.dumps(response.to_dict(), ensure_ascii=False, indent=2).encode("utf-8")
        await self._store.put(response.storage_key, payload, "application/json")
        logger.info("Stored contact form response %s from %s", response.id, response.email)
        return response

    async def list_responses(
        self, page: int = 1, limit: int = 10
    ) -> tuple[list[FormResponse], Pagination]:
        """Newest first, one page at a time."""
        objects = await self._store.list(PREFIX)
        objects.sort(key=lambda obj: (obj.uploaded, obj.key), reverse=True)

        offset = (page - 1) * limit
        page_objects = objects[offset : offset + limit]
        raw = await asyncio.gather(*(self._store.get(obj.key) for obj in page_objects))

        responses: list[FormResponse] = []
        for obj, content in zip(page_objects, raw):
            if content is None:
                continue
            try:
                responses.append(FormResponse.from_dict(json.loads(content)))
            except (ValueError, KeyError) as exc:
                logger.warning("Skipping unreadable form response %s: %s", obj.key, exc)

        total = len(objects)
        total_pages = math.ceil(total / limit) if limit else 0
        pagination = Pagination(
            page=page,
            limit=limit,
            total=total,
            totalPages=total_pages,
            hasNext=page < total_pages,
            hasPrev=page > 1,
        )
        return responses, pagination
