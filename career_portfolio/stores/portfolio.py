"""
Career Portfolio - Portfolio store.

Holds the signed-in user's own portfolio and, separately, whichever public
portfolio is being viewed, so browsing someone else's page never replaces
the owner's cached settings.
"""
from typing import List, Optional

from ..api.portfolio import PortfolioApi
from ..events import EventBus, MutationEvent
from ..schemas import (
    PayloadLike, Portfolio, PortfolioAnalytics, PortfolioAsset, PortfolioContent
)
from .base import BaseStore


class PortfolioStore(BaseStore):
    name = "portfolio"

    def __init__(self, api: PortfolioApi, bus: EventBus):
        super().__init__(bus)
        self.api = api
        self.portfolio: Optional[Portfolio] = None
        self.assets: List[PortfolioAsset] = []
        self.analytics: Optional[PortfolioAnalytics] = None
        self.content: Optional[PortfolioContent] = None
        self.public_portfolio: Optional[Portfolio] = None
        self.public_content: Optional[PortfolioContent] = None

    def clear(self) -> None:
        self.portfolio = None
        self.assets = []
        self.analytics = None
        self.content = None
        self.error = None
        self._notify()

    def clear_public(self) -> None:
        self.public_portfolio = None
        self.public_content = None
        self._notify()

    # --- own portfolio ---

    async def fetch(self) -> Optional[Portfolio]:
        return await self._run(
            self.api.get, self._set_portfolio,
            "Failed to fetch portfolio",
            latest="portfolio",
        )

    async def save(self, data: PayloadLike) -> Optional[Portfolio]:
        return await self._run(
            lambda: self.api.save(data), self._set_portfolio,
            "Failed to create/update portfolio",
            event=MutationEvent.PORTFOLIO_SAVED,
        )

    async def generate(self, options: Optional[PayloadLike] = None) -> Optional[PortfolioContent]:
        return await self._run(
            lambda: self.api.generate(options), self._set_content,
            "Failed to generate portfolio content",
            event=MutationEvent.PORTFOLIO_GENERATED,
            latest="generate",
        )

    async def update_seo(self, data: PayloadLike) -> Optional[Portfolio]:
        return await self._run(
            lambda: self.api.update_seo(data), self._set_portfolio,
            "Failed to update portfolio SEO",
            event=MutationEvent.PORTFOLIO_SEO_UPDATED,
        )

    async def toggle_visibility(self) -> Optional[Portfolio]:
        return await self._run(
            self.api.toggle_visibility, self._set_portfolio,
            "Failed to toggle portfolio visibility",
            event=MutationEvent.PORTFOLIO_VISIBILITY_TOGGLED,
        )

    async def fetch_analytics(self, days: int = 30) -> Optional[PortfolioAnalytics]:
        return await self._run(
            lambda: self.api.analytics(days), self._set_analytics,
            "Failed to fetch portfolio analytics",
            latest="analytics",
        )

    # --- assets ---

    async def fetch_assets(self, portfolio_id: Optional[str] = None) -> Optional[List[PortfolioAsset]]:
        """Assets of the given portfolio, or of the cached one."""
        if portfolio_id is None and self.portfolio is not None:
            portfolio_id = self.portfolio.id
        if portfolio_id is None:
            self.error = "Load the portfolio before its assets"
            self.logger.warning(self.error)
            self._notify()
            return None
        return await self._run(
            lambda: self.api.assets(portfolio_id), self._set_assets,
            "Failed to fetch portfolio assets",
            latest="assets",
        )

    async def add_asset(self, data: PayloadLike) -> Optional[PortfolioAsset]:
        return await self._run(
            lambda: self.api.add_asset(data), self._on_asset_added,
            "Failed to add portfolio asset",
            event=MutationEvent.PORTFOLIO_ASSET_ADDED,
        )

    async def delete_asset(self, asset_id: str) -> Optional[str]:
        return await self._run(
            lambda: self.api.delete_asset(asset_id), self._on_asset_deleted,
            "Failed to delete portfolio asset",
            event=MutationEvent.PORTFOLIO_ASSET_DELETED,
        )

    # --- public pages ---

    async def fetch_public(self, user_id: str) -> Optional[Portfolio]:
        return await self._run(
            lambda: self.api.public(user_id), self._set_public_portfolio,
            "Failed to fetch public portfolio",
            latest="public",
        )

    async def fetch_public_content(self, user_id: str) -> Optional[PortfolioContent]:
        return await self._run(
            lambda: self.api.public_content(user_id), self._set_public_content,
            "Failed to fetch public portfolio content",
            latest="public_content",
        )

    # --- reducers ---

    def _set_portfolio(self, portfolio: Optional[Portfolio]) -> None:
        self.portfolio = portfolio

    def _set_content(self, content: PortfolioContent) -> None:
        self.content = content

    def _set_analytics(self, analytics: PortfolioAnalytics) -> None:
        self.analytics = analytics

    def _set_assets(self, assets: List[PortfolioAsset]) -> None:
        self.assets = sorted(assets, key=lambda a: a.order)

    def _on_asset_added(self, asset: PortfolioAsset) -> None:
        self.assets = self.assets + [asset]

    def _on_asset_deleted(self, asset_id: str) -> None:
        self.assets = [a for a in self.assets if a.id != asset_id]

    def _set_public_portfolio(self, portfolio: Portfolio) -> None:
        self.public_portfolio = portfolio

    def _set_public_content(self, content: PortfolioContent) -> None:
        self.public_content = content
