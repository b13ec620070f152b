from __future__ import annotations

import logging

from fastapi import APIRouter, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from starlette.responses import Response

from cobj_core.hubspot import CustomObjectClient, RecordProperties, RemoteError
from cobj_core.ui.views import FORM_TITLE, HOMEPAGE_TITLE, render_form_page, render_records_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ui"])


def _get_client(request: Request) -> CustomObjectClient:
    client = getattr(request.app.state, "cobj_client", None)
    if client is None:
        raise HTTPException(status_code=500, detail="Remote client not initialized")
    return client


@router.get("/", response_model=None)
async def ui_records_list(request: Request) -> Response:
    client = _get_client(request)
    try:
        records = await client.list_records()
    except RemoteError as exc:
        logger.error("Error fetching custom object records: %s", exc.detail())
        return PlainTextResponse("Error fetching custom object records.", status_code=500)

    return HTMLResponse(render_records_page(HOMEPAGE_TITLE, records))


@router.get("/update-cobj", response_class=HTMLResponse)
async def ui_update_form() -> HTMLResponse:
    return HTMLResponse(render_form_page(FORM_TITLE))


@router.post("/update-cobj", response_model=None)
async def ui_update_submit(
    request: Request,
    name: str = Form(default=""),
    species: str = Form(default=""),
    bio: str = Form(default=""),
    dog: str = Form(default=""),
) -> Response:
    client = _get_client(request)
    properties = RecordProperties(name=name, species=species, bio=bio, dog=dog)
    try:
        await client.create_record(properties)
    except RemoteError as exc:
        logger.error("Error creating custom object record: %s", exc.detail())
        return PlainTextResponse("Error creating custom object record.", status_code=500)

    logger.info("Custom object record created")
    return RedirectResponse(url="/", status_code=302)
