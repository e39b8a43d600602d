"""
Catalog Routes - Product listing for the landing page and voice chat config.
"""
from typing import Optional

from fastapi import APIRouter, Query

from ai_playground.catalog import get_product, get_voice_chat_config, list_categories, list_products
from ai_playground.models.catalog import Product, ProductListResponse, VoiceChatConfig
from ai_playground.models.common import ErrorResponse

router = APIRouter(
    prefix="/api",
    tags=["Catalog"],
)


@router.get(
    "/products",
    response_model=ProductListResponse,
    summary="List playground products",
)
async def get_products(
    category: Optional[str] = Query(default=None, description='Category filter; "すべて" lists all'),
    search: Optional[str] = Query(default=None, description="Matches title, description or tags, ignoring case"),
) -> ProductListResponse:
    return ProductListResponse(
        products=list_products(category, search),
        categories=list_categories(),
    )


@router.get(
    "/products/{product_id}",
    response_model=Product,
    responses={404: {"model": ErrorResponse, "description": "Unknown product"}},
    summary="Get one product",
)
async def get_product_detail(product_id: str) -> Product:
    return get_product(product_id)


@router.get(
    "/voice-chat/config",
    response_model=VoiceChatConfig,
    summary="ElevenLabs widget configuration",
)
async def voice_chat_config() -> VoiceChatConfig:
    return get_voice_chat_config()
