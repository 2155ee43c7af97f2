"""POST /intent endpoint"""

import logging

from fastapi import APIRouter, Depends

from sitegen_api.api.deps import get_pipeline, lenient_body
from sitegen_api.core.pipeline import SitePipeline
from sitegen_api.models.errors import ApplicationError, ValidationError
from sitegen_api.models.schemas import IntentRequest, IntentResponse

router = APIRouter()
logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Intent detection failed"


@router.post("/intent", response_model=IntentResponse, response_model_exclude_none=True)
async def detect_intent(
    payload: IntentRequest = Depends(lenient_body(IntentRequest)),
    pipeline: SitePipeline = Depends(get_pipeline),
) -> IntentResponse:
    """
    Translate Tamil text and detect what site the user wants.

    Failures are reported in the body with HTTP 200.
    """
    try:
        intent = await pipeline.detect_intent(payload.tamilText)
    except ValidationError as e:
        return IntentResponse(success=False, error=e.message)
    except ApplicationError as e:
        logger.error(f"Intent detection failed: {e.model_dump()}")
        return IntentResponse(success=False, error=FAILURE_MESSAGE)
    except Exception:
        logger.exception("Unexpected error during intent detection")
        return IntentResponse(success=False, error=FAILURE_MESSAGE)

    return IntentResponse(success=True, intent=intent)
