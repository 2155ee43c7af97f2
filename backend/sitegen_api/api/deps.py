"""Request-scoped dependencies"""

import json
import logging
from typing import Any, Callable, Dict, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError as PydanticValidationError

from sitegen_api.core.pipeline import SitePipeline

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_pipeline(request: Request) -> SitePipeline:
    """Pipeline built by create_app and kept on app.state"""
    return request.app.state.pipeline


async def read_json_object(request: Request) -> Dict[str, Any]:
    """
    Body as a JSON object.

    Absent bodies, non-JSON content types, unparsable JSON and non-object
    values all read as ``{}``.
    """
    content_type = request.headers.get("content-type", "")
    raw = await request.body()
    if not raw or "json" not in content_type.lower():
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        logger.warning(f"Ignoring unparsable JSON body on {request.url.path}")
        return {}
    return data if isinstance(data, dict) else {}


def lenient_body(model_cls: Type[ModelT]) -> Callable:
    """
    Dependency that never rejects a request body.

    Fields that fail validation come back as their defaults, so the route
    reports missing input in-band instead of FastAPI answering 422.
    """
    async def dependency(request: Request) -> ModelT:
        data = await read_json_object(request)
        try:
            return model_cls.model_validate(data)
        except PydanticValidationError as e:
            logger.warning(f"Invalid {model_cls.__name__} on {request.url.path}: {e.error_count()} error(s)")
            return model_cls()
    return dependency
