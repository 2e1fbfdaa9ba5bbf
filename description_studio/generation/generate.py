import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence

from openai import OpenAI, OpenAIError

from description_studio.integrations.contracts.catalog import BulkProductItem, ImprovementResult
from description_studio.integrations.errors import GenerationError

logger = logging.getLogger(__name__)

MODEL_NAME = "gpt-4"
TEMPERATURE = 0.7
MAX_TOKENS = 800

SYSTEM_INSTRUCTION = (
    "Sen profesyonel bir e-ticaret ürün açıklaması yazarısın. "
    "Verilen ürün açıklamalarını daha çekici, SEO uyumlu ve satış odaklı hale getir. "
    "Türkçe yaz. "
    "HTML formatında yanıt ver (p, ul, li, strong etiketlerini kullan)."
)

MISSING_DESCRIPTION_PLACEHOLDER = "Açıklama yok"


def build_messages(title: Optional[str], current_description: Optional[str]) -> List[Dict[str, str]]:
    """System instruction plus a user message embedding the title and current text."""
    user_content = (
        f"Ürün: {title or ''}\n\n"
        f"Mevcut Açıklama: {current_description or MISSING_DESCRIPTION_PLACEHOLDER}\n\n"
        "Bu açıklamayı iyileştir ve daha detaylı, çekici hale getir."
    )
    return [
        {"role": "system", "content": SYSTEM_INSTRUCTION},
        {"role": "user", "content": user_content},
    ]


class DescriptionGenerator:
    """
    Rewrites product descriptions through the OpenAI chat completions API.

    Model, temperature and output length are module constants. The OpenAI
    client is created on first use so a missing key only fails the requests
    that need it.
    """

    def __init__(self, api_key: Optional[str] = None, client: Any = None):
        self.api_key = api_key
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            if not self.api_key:
                raise GenerationError("OPENAI_API_KEY is not configured")
            self._client = OpenAI(api_key=self.api_key)
        return self._client

    async def improve_one(self, title: Optional[str], current_description: Optional[str]) -> str:
        title = title or ""
        client = self.client
        messages = build_messages(title, current_description)

        logger.info(f"Generating description for product: {title[:100]}")

        # The OpenAI SDK call is blocking; run it off the event loop.
        def _sync_create():
            return client.chat.completions.create(
                model=MODEL_NAME,
                messages=messages,
                temperature=TEMPERATURE,
                max_tokens=MAX_TOKENS,
            )

        try:
            completion = await asyncio.to_thread(_sync_create)
        except OpenAIError as e:
            logger.error(f"OpenAI error when generating description: {type(e).__name__}: {e}")
            raise GenerationError(str(e), status_code=getattr(e, "status_code", None)) from e

        try:
            text = (completion.choices[0].message.content or "").strip()
        except (AttributeError, IndexError) as e:
            raise GenerationError(f"Unexpected OpenAI response: {e}") from e

        if not text:
            raise GenerationError("OpenAI returned an empty description")
        return text

    async def improve_batch(self, items: Sequence[BulkProductItem]) -> List[ImprovementResult]:
        """
        Improve each item in turn, awaiting one call before starting the next.

        A failing item becomes a failed ImprovementResult and the loop moves on,
        so the result list always has one entry per input item, in input order.
        """
        results: List[ImprovementResult] = []
        for item in items:
            try:
                text = await self.improve_one(item.title, item.description)
            except Exception as e:
                logger.warning("Bulk improvement failed for product %s: %s", item.id, e)
                results.append(ImprovementResult.failed(item.id, str(e)))
                continue
            results.append(ImprovementResult.ok(item.id, text))

        succeeded = sum(1 for r in results if r.success)
        logger.info("Bulk improvement finished: %s/%s succeeded", succeeded, len(results))
        return results
