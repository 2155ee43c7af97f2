"""POST /generate-code endpoint"""

import logging

from fastapi import APIRouter, Depends

from sitegen_api.api.deps import get_pipeline, lenient_body
from sitegen_api.core.pipeline import SitePipeline
from sitegen_api.models.errors import ApplicationError, ValidationError
from sitegen_api.models.schemas import GenerateCodeRequest, GenerateCodeResponse

router = APIRouter()
logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Code generation failed"


@router.post("/generate-code", response_model=GenerateCodeResponse, response_model_exclude_none=True)
async def generate_code(
    payload: GenerateCodeRequest = Depends(lenient_body(GenerateCodeRequest)),
    pipeline: SitePipeline = Depends(get_pipeline),
) -> GenerateCodeResponse:
    """Generate the site for an intent and save it as index.html"""
    try:
        files = await pipeline.generate_code(payload.intent)
    except ValidationError as e:
        return GenerateCodeResponse(success=False, error=e.message)
    except ApplicationError as e:
        # Previous artifact is left untouched
        logger.error(f"Code generation failed: {e.model_dump()}")
        return GenerateCodeResponse(success=False, error=FAILURE_MESSAGE)
    except Exception:
        logger.exception("Unexpected error during code generation")
        return GenerateCodeResponse(success=False, error=FAILURE_MESSAGE)

    return GenerateCodeResponse(success=True, files=files)
