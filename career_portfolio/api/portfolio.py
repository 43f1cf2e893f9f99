"""
Career Portfolio - Public portfolio endpoints.

One portfolio per user: its settings, uploaded assets, visit analytics and
the generated site content. The public routes are readable without a
session, so a 401 there never signs the visitor out.
"""
from typing import List, Optional

from ..schemas import (
    PayloadLike, Portfolio, PortfolioAnalytics, PortfolioAsset,
    PortfolioAssetCreate, PortfolioContent, PortfolioGenerateOptions,
    PortfolioSeo, PortfolioUpdate
)
from .base import to_payload
from .client import ApiClient


class PortfolioApi:
    path = "/portfolio"

    def __init__(self, client: ApiClient):
        self.client = client

    async def get(self) -> Optional[Portfolio]:
        data = await self.client.get(self.path)
        return Portfolio.model_validate(data) if data else None

    async def save(self, data: PayloadLike) -> Portfolio:
        """Create the portfolio, or update it when one exists."""
        payload = to_payload(PortfolioUpdate, data)
        return Portfolio.model_validate(await self.client.post(self.path, json=payload))

    async def generate(self, options: Optional[PayloadLike] = None) -> PortfolioContent:
        payload = to_payload(PortfolioGenerateOptions, options)
        return PortfolioContent.model_validate(await self.client.post(f"{self.path}/generate", json=payload))

    async def assets(self, portfolio_id: str) -> List[PortfolioAsset]:
        data = await self.client.get(f"{self.path}/assets/{portfolio_id}")
        return [PortfolioAsset.model_validate(a) for a in (data or [])]

    async def add_asset(self, data: PayloadLike) -> PortfolioAsset:
        payload = to_payload(PortfolioAssetCreate, data)
        return PortfolioAsset.model_validate(await self.client.post(f"{self.path}/assets", json=payload))

    async def delete_asset(self, asset_id: str) -> str:
        await self.client.delete(f"{self.path}/assets/{asset_id}")
        return asset_id

    async def analytics(self, days: int = 30) -> PortfolioAnalytics:
        data = await self.client.get(f"{self.path}/analytics", params={"days": days})
        return PortfolioAnalytics.model_validate(data or {})

    async def update_seo(self, data: PayloadLike) -> Portfolio:
        payload = to_payload(PortfolioSeo, data)
        return Portfolio.model_validate(await self.client.put(f"{self.path}/seo", json=payload))

    async def toggle_visibility(self) -> Portfolio:
        return Portfolio.model_validate(await self.client.put(f"{self.path}/visibility"))

    async def public(self, user_id: str) -> Portfolio:
        return Portfolio.model_validate(await self.client.get(f"{self.path}/public/{user_id}"))

    async def public_content(self, user_id: str) -> PortfolioContent:
        data = await self.client.get(f"{self.path}/public/{user_id}/content")
        return PortfolioContent.model_validate(data or {})
