"""
Models for the product catalog and voice chat widget configuration.
"""
from typing import List, Optional

from pydantic import BaseModel, Field


class Product(BaseModel):
    """One card on the playground landing page."""
    id: str
    title: str
    description: str
    category: str
    tags: List[str] = Field(default_factory=list)
    author: str
    createdAt: str
    imageUrl: Optional[str] = None
    isNew: bool = False
    route: Optional[str] = Field(
        default=None,
        description="Page of the live demo; showcase entries have none",
    )


class ProductListResponse(BaseModel):
    products: List[Product]
    categories: List[str]


class VoiceChatConfig(BaseModel):
    """What the front end needs to embed the ElevenLabs widget."""
    scriptUrl: str
    agentId: Optional[str] = None
    available: bool
