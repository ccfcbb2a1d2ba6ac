from fastapi import APIRouter, status

from ..schemas.rider import RiderDocument, RiderGenerateIn, RiderTemplateRead
from ..services.rider_engine import (
    InvalidRosterError,
    UnknownTemplateError,
    generate_from_template,
    generate_rider,
    list_templates,
)
from ..utils import engine_error_response

router = APIRouter(tags=["rider"])


@router.post("/riders/generate", response_model=RiderDocument, status_code=status.HTTP_200_OK)
def generate(body: RiderGenerateIn):
    try:
        return generate_rider(body.roster, body.rider_type, body.options)
    except InvalidRosterError as exc:
        raise engine_error_response(exc)


# ─── Templates ───────────────────────────────────────────────────────────────


@router.get("/rider/templates")
def list_rider_templates():
    return {
        "templates": [
            RiderTemplateRead(
                name=t.name,
                rider_type=t.rider_type,
                roster=list(t.roster.performers),
                options=t.options,
            )
            for t in list_templates()
        ]
    }


@router.post("/rider/templates/{name}/generate", response_model=RiderDocument)
def generate_rider_from_template(name: str):
    try:
        return generate_from_template(name)
    except UnknownTemplateError as exc:
        raise engine_error_response(exc)
