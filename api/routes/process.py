import logging
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_feedback_service
from api.errors import MSG_INVALID_BODY, InvalidRequest
from config import settings
from models import ErrorResp, ProcessReq, ProcessResp
from modes import Mode, allowed_modes_message, get_mode
from services.openai_service import EmptyGenerationError, ProfileFeedbackService
from utils.image_utils import normalize_image

logger = logging.getLogger(__name__)

process_router = APIRouter(prefix="/api", tags=["process"])

MSG_NO_IMAGES = "No images provided"
MSG_INTERNAL_ERROR = "Internal Server Error"


def _validate(req: ProcessReq) -> tuple[List[str], Mode]:
    if not req.images:
        raise InvalidRequest(MSG_NO_IMAGES)

    mode = get_mode(req.mode)
    if mode is None:
        raise InvalidRequest(allowed_modes_message())

    images = req.images
    if not isinstance(images, list) or not all(isinstance(image, str) for image in images):
        raise InvalidRequest(MSG_INVALID_BODY)

    if settings.MAX_IMAGES and len(images) > settings.MAX_IMAGES:
        raise InvalidRequest(f"Too many images (max {settings.MAX_IMAGES})")

    try:
        image_urls = [normalize_image(image, settings.MAX_IMAGE_BYTES) for image in images]
    except ValueError as exc:
        raise InvalidRequest(str(exc)) from exc

    return image_urls, mode


def _failure(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content=ErrorResp(message=message).model_dump())


@process_router.post(
    "/process",
    response_model=ProcessResp,
    responses={400: {"description": "Invalid request"}, 500: {"model": ErrorResp}},
)
def process(req: ProcessReq, service: ProfileFeedbackService = Depends(get_feedback_service)):
    image_urls, mode = _validate(req)

    # All or nothing: text generated before a failed synthesis is dropped
    try:
        result = service.process(mode, image_urls)
    except EmptyGenerationError as exc:
        logger.error("Empty generation for mode %s", mode.name)
        return _failure(str(exc))
    except Exception:
        logger.exception("Error in generating content for mode %s", mode.name)
        return _failure(MSG_INTERNAL_ERROR)

    return ProcessResp(success=True, text=result.text, audio_base64=result.audio_base64)
