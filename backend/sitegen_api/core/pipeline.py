"""Request pipeline: intent -> site -> preview / download"""

import logging
from pathlib import Path
from typing import List, Optional

from starlette.concurrency import run_in_threadpool

from sitegen_api.core.archive_builder import ArchiveBuilder
from sitegen_api.core.artifact_store import ArtifactStore, NOT_FOUND_MESSAGE, SITE_INDEX
from sitegen_api.core.completion_client import CompletionClient
from sitegen_api.core.config import Settings
from sitegen_api.core.prompts import (
    CODEGEN_SYSTEM_PROMPT,
    INTENT_SYSTEM_PROMPT,
    build_codegen_prompt,
    build_intent_prompt,
)
from sitegen_api.models.errors import ArchiveError, CompletionError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _require_text(value: Optional[str], message: str) -> str:
    if value is None or not value.strip():
        logger.warning(f"Validation failed: {message}")
        raise ValidationError(message)
    return value


class SitePipeline:
    """
    Sequences the completion client, artifact store and archive builder.

    Every operation raises a subclass of ApplicationError on failure; the
    HTTP layer decides how each one is reported.
    """

    def __init__(
        self,
        completion_client: CompletionClient,
        artifact_store: ArtifactStore,
        archive_builder: ArchiveBuilder,
        settings: Settings,
    ):
        self.completion_client = completion_client
        self.artifact_store = artifact_store
        self.archive_builder = archive_builder
        self.settings = settings

    async def detect_intent(self, raw_text: Optional[str]) -> str:
        """Translate Tamil text to English and summarise the intent."""
        text = _require_text(raw_text, "No Tamil text provided")
        result = await self.completion_client.complete(
            INTENT_SYSTEM_PROMPT,
            build_intent_prompt(text),
            model=self.settings.intent_model,
        )
        intent = result.strip()
        if not intent:
            raise CompletionError("Completion returned an empty intent")
        logger.info(f"Detected intent ({len(intent)} chars)")
        return intent

    async def generate_code(self, intent: Optional[str]) -> List[str]:
        """Generate the site for ``intent`` and persist it as index.html."""
        intent = _require_text(intent, "No intent provided")
        html = await self.completion_client.complete(
            CODEGEN_SYSTEM_PROMPT,
            build_codegen_prompt(intent),
            model=self.settings.codegen_model,
        )
        # Markup is stored exactly as returned
        if not html.strip():
            raise CompletionError("Completion returned an empty site")
        await run_in_threadpool(self.artifact_store.write, SITE_INDEX, html)
        return [SITE_INDEX]

    async def preview(self) -> str:
        """Content of the current artifact."""
        try:
            return await run_in_threadpool(self.artifact_store.read, SITE_INDEX)
        except NotFoundError:
            logger.info("Preview requested before any site was generated")
            raise

    async def package(self) -> Path:
        """Zip the artifact directory and return the staged archive path."""
        if not self.artifact_store.exists(SITE_INDEX):
            logger.info("Download requested before any site was generated")
            raise NotFoundError(NOT_FOUND_MESSAGE)
        try:
            return await run_in_threadpool(self.archive_builder.build, self.artifact_store.directory)
        except ArchiveError as e:
            logger.warning(f"Nothing to package: {e.message}")
            raise NotFoundError(NOT_FOUND_MESSAGE) from e
