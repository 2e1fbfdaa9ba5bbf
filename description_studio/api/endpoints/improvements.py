from fastapi import APIRouter, Depends

from description_studio.api.dependencies import get_generator
from description_studio.generation.generate import DescriptionGenerator
from description_studio.integrations.contracts.catalog import (
    BulkImproveRequest,
    ImproveDescriptionRequest,
    ImproveDescriptionResponse,
)

api = APIRouter()
improvements_api = api


@api.post("/improve-description", response_model=ImproveDescriptionResponse, tags=["Improvements"])
async def improve_description(
    body: ImproveDescriptionRequest,
    generator: DescriptionGenerator = Depends(get_generator),
):
    text = await generator.improve_one(body.product_title, body.current_description)
    return ImproveDescriptionResponse(improved_description=text)


@api.post("/improve-bulk", tags=["Improvements"])
async def improve_bulk(
    body: BulkImproveRequest,
    generator: DescriptionGenerator = Depends(get_generator),
):
    """
    Improve every submitted product, one after another.

    Per-item failures are reported inside `results`; the request itself
    succeeds even when every item failed.
    """
    results = await generator.improve_batch(body.products)
    return {"results": [r.to_payload() for r in results]}
