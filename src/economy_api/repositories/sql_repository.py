"""SQL implementation of EconomyStore.

Listings live in a single ``listings`` table; every aggregate is computed
by the database. Any SQLAlchemy async URL works, SQLite via aiosqlite is
the default.
"""

from collections.abc import Callable, Iterable
from datetime import date, datetime, timedelta, timezone

from sqlalchemy import Date, Float, Index, Integer, String, func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from economy_api.config import settings
from economy_api.entities import (
    ItemDetailEntity,
    ItemSummaryEntity,
    ListingEntity,
    PricePointEntity,
)


class EconomyBase(DeclarativeBase):
    """Base class for economy tables."""

    pass


class ListingRow(EconomyBase):
    """One market listing."""

    __tablename__ = "listings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    item_name: Mapped[str] = mapped_column(String)
    season: Mapped[int] = mapped_column(Integer)
    price: Mapped[float] = mapped_column(Float)
    quantity: Mapped[int] = mapped_column(Integer, default=1)
    seller: Mapped[str | None] = mapped_column(String, nullable=True)
    data_date: Mapped[date] = mapped_column(Date)
    ingestion_date: Mapped[date] = mapped_column(Date)

    __table_args__ = (
        Index("ix_listings_season_data_date", "season", "data_date"),
        Index("ix_listings_item_data_date", "item_name", "data_date"),
        Index("ix_listings_item_ingestion_date", "item_name", "ingestion_date"),
    )


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


class SqlEconomyRepository:
    """SQLAlchemy implementation of the EconomyStore protocol.

    This class satisfies the EconomyStore protocol through structural
    typing - no explicit inheritance needed. Tables are created on first
    use.
    """

    def __init__(
        self,
        database_url: str | None = None,
        today: Callable[[], date] | None = None,
        echo: bool = False,
    ) -> None:
        """Initialize the repository.

        Args:
            database_url: SQLAlchemy async URL. If None, uses settings.
            today: Returns the date day windows end on. Defaults to today (UTC).
            echo: Log emitted SQL.
        """
        self._database_url = database_url or settings.database_url
        self._engine = create_async_engine(self._database_url, echo=echo)
        self._session_factory = async_sessionmaker(self._engine, expire_on_commit=False)
        self._today = today or _utc_today
        self._initialized = False

    @classmethod
    def create(cls, database_url: str | None = None) -> "SqlEconomyRepository":
        """Factory method to create SqlEconomyRepository with defaults.

        Args:
            database_url: SQLAlchemy async URL. If None, uses settings.

        Returns:
            Configured SqlEconomyRepository
        """
        return cls(database_url=database_url)

    async def _ensure_initialized(self) -> None:
        """Create tables if they don't exist."""
        if not self._initialized:
            async with self._engine.begin() as conn:
                await conn.run_sync(EconomyBase.metadata.create_all)
            self._initialized = True

    async def _get_session(self) -> AsyncSession:
        await self._ensure_initialized()
        return self._session_factory()

    # === Writes ===

    async def save_listings(self, listings: Iterable[ListingEntity]) -> list[ListingEntity]:
        """Insert listings.

        Args:
            listings: Listings to insert; their ids are ignored

        Returns:
            The inserted listings with storage ids
        """
        async with await self._get_session() as session:
            rows = [
                ListingRow(
                    item_name=listing.item_name,
                    season=listing.season,
                    price=listing.price,
                    quantity=listing.quantity,
                    seller=listing.seller,
                    data_date=listing.data_date,
                    ingestion_date=listing.ingestion_date,
                )
                for listing in listings
            ]
            session.add_all(rows)
            await session.commit()
            return [self._row_to_listing(row) for row in rows]

    # === Reads ===

    async def get_items_summary(self, season: int, days: int) -> list[ItemSummaryEntity]:
        """Aggregate a season's listings per item over the last ``days`` days.

        The window ends today and includes it, so ``days=1`` covers today only.
        """
        since = self._today() - timedelta(days=days - 1)
        listing_count = func.count(ListingRow.id)

        async with await self._get_session() as session:
            stmt = (
                select(
                    ListingRow.item_name,
                    listing_count,
                    func.sum(ListingRow.quantity),
                    func.min(ListingRow.price),
                    func.max(ListingRow.price),
                    func.avg(ListingRow.price),
                    func.max(ListingRow.data_date),
                )
                .where(ListingRow.season == season, ListingRow.data_date >= since)
                .group_by(ListingRow.item_name)
                .order_by(listing_count.desc(), ListingRow.item_name)
            )
            result = await session.execute(stmt)
            return [self._aggregate_to_summary(*row) for row in result.all()]

    async def get_total_listings_count(self, season: int) -> int:
        async with await self._get_session() as session:
            result = await session.execute(
                select(func.count(ListingRow.id)).where(ListingRow.season == season)
            )
            return int(result.scalar_one())

    async def get_listings_by_data_date(
        self,
        item_name: str,
        data_date: date,
        season: int | None = None,
    ) -> list[ListingEntity]:
        async with await self._get_session() as session:
            stmt = select(ListingRow).where(
                ListingRow.item_name == item_name,
                ListingRow.data_date == data_date,
            )
            if season is not None:
                stmt = stmt.where(ListingRow.season == season)

            result = await session.execute(stmt.order_by(ListingRow.id))
            return [self._row_to_listing(row) for row in result.scalars().all()]

    async def get_listings_by_ingestion_date(
        self,
        item_name: str,
        ingestion_date: date,
        season: int | None = None,
    ) -> list[ListingEntity]:
        async with await self._get_session() as session:
            stmt = select(ListingRow).where(
                ListingRow.item_name == item_name,
                ListingRow.ingestion_date == ingestion_date,
            )
            if season is not None:
                stmt = stmt.where(ListingRow.season == season)

            result = await session.execute(stmt.order_by(ListingRow.id))
            return [self._row_to_listing(row) for row in result.scalars().all()]

    async def get_item_detail(
        self,
        item_name: str,
        season: int | None = None,
        limit: int = 100,
    ) -> ItemDetailEntity:
        """Get summary, daily price history and the most recent listings.

        Args:
            item_name: Name of the item
            season: Optional season filter, None for all seasons
            limit: Maximum number of recent listings

        Returns:
            ItemDetailEntity; its summary is None when nothing matches
        """
        filters = [ListingRow.item_name == item_name]
        if season is not None:
            filters.append(ListingRow.season == season)

        async with await self._get_session() as session:
            summary_row = (
                await session.execute(
                    select(
                        ListingRow.item_name,
                        func.count(ListingRow.id),
                        func.sum(ListingRow.quantity),
                        func.min(ListingRow.price),
                        func.max(ListingRow.price),
                        func.avg(ListingRow.price),
                        func.max(ListingRow.data_date),
                    )
                    .where(*filters)
                    .group_by(ListingRow.item_name)
                )
            ).first()

            history = await session.execute(
                select(
                    ListingRow.data_date,
                    func.count(ListingRow.id),
                    func.min(ListingRow.price),
                    func.max(ListingRow.price),
                    func.avg(ListingRow.price),
                )
                .where(*filters)
                .group_by(ListingRow.data_date)
                .order_by(ListingRow.data_date)
            )

            recent = await session.execute(
                select(ListingRow)
                .where(*filters)
                .order_by(ListingRow.data_date.desc(), ListingRow.id.desc())
                .limit(limit)
            )

            return ItemDetailEntity(
                item_name=item_name,
                season=season,
                summary=self._aggregate_to_summary(*summary_row) if summary_row else None,
                price_history=[
                    PricePointEntity(
                        date=self._as_date(day),
                        listing_count=int(count),
                        min_price=float(low),
                        max_price=float(high),
                        avg_price=float(mean),
                    )
                    for day, count, low, high, mean in history.all()
                ],
                listings=[self._row_to_listing(row) for row in recent.scalars().all()],
            )

    async def health_check(self) -> bool:
        """Check if the database is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False

    async def close(self) -> None:
        """Dispose of the engine's connection pool."""
        await self._engine.dispose()

    # === Conversion ===

    @staticmethod
    def _as_date(value: date | str) -> date:
        # aggregates over Date columns come back as text on some backends
        if isinstance(value, str):
            return date.fromisoformat(value)
        return value

    @classmethod
    def _aggregate_to_summary(
        cls,
        item_name: str,
        count: int,
        quantity: int | None,
        low: float,
        high: float,
        mean: float,
        last_seen: date | str,
    ) -> ItemSummaryEntity:
        return ItemSummaryEntity(
            item_name=item_name,
            listing_count=int(count),
            total_quantity=int(quantity or 0),
            min_price=float(low),
            max_price=float(high),
            avg_price=round(float(mean), 4),
            last_seen=cls._as_date(last_seen),
        )

    @staticmethod
    def _row_to_listing(row: ListingRow) -> ListingEntity:
        return ListingEntity(
            id=row.id,
            item_name=row.item_name,
            season=row.season,
            price=row.price,
            quantity=row.quantity,
            seller=row.seller,
            data_date=row.data_date,
            ingestion_date=row.ingestion_date,
        )
