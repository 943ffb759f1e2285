"""
Sales analytics service for reporting on completed orders.

All methods are read-only over a snapshot of orders. Records that cannot be
read are skipped with a warning and missing categorical values fall back to
defaults, so one bad document never aborts a report.
"""

from typing import Any, Dict, Iterable, List, Optional
from datetime import datetime, timedelta, timezone
from collections import defaultdict
import logging

from pydantic import ValidationError as PydanticValidationError

from restobill.core.config import get_settings
from restobill.modules.orders.enums.order_enums import (
    OrderStatus,
    PaymentMode,
    DeliveryMethod,
)
from ..enums.analytics_enums import ReportRange
from ..schemas.analytics_schemas import (
    OrderRecord,
    SalesBucket,
    SalesSummary,
    DistributionSlice,
    LedgerRow,
    LedgerPage,
    SalesReport,
)

logger = logging.getLogger(__name__)

PAYMENT_MODES = [mode.value for mode in PaymentMode]
DELIVERY_METHODS = [method.value for method in DeliveryMethod]
DEFAULT_PAYMENT_MODE = PaymentMode.CASH.value
DEFAULT_DELIVERY_METHOD = DeliveryMethod.NONE.value


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SalesAnalyticsService:
    """Service for sales time series, payment/delivery mix and the ledger"""

    def __init__(
        self,
        weekly_window_days: Optional[int] = None,
        ledger_limit: Optional[int] = None,
    ):
        settings = get_settings()
        self.weekly_window_days = weekly_window_days or settings.weekly_window_days
        self.ledger_limit = ledger_limit or settings.ledger_display_limit

    def completed_orders(self, orders: Iterable[Any]) -> List[OrderRecord]:
        """
        Completed orders with a completion time, most recent first.

        Accepts order models or raw documents.
        """
        records = []
        for raw in orders:
            record = self._to_record(raw)
            if record is None:
                continue
            if record.status != OrderStatus.COMPLETED.value or record.completed_at is None:
                continue
            record.completed_at = _as_utc(record.completed_at)
            records.append(record)

        records.sort(key=lambda r: r.completed_at, reverse=True)
        return records

    def sales_series(
        self,
        orders: Iterable[Any],
        report_range: ReportRange = ReportRange.WEEKLY,
        now: Optional[datetime] = None,
    ) -> List[SalesBucket]:
        """
        Bucket completed orders by completion date.

        ``daily`` groups by ISO date, ``weekly`` groups by ISO date over the
        trailing window only, ``monthly`` groups by year-month. Buckets come
        back in chronological order.
        """
        report_range = ReportRange(report_range)
        now = _as_utc(now or datetime.now(timezone.utc))
        window = timedelta(days=self.weekly_window_days)

        grouped: Dict[str, SalesBucket] = {}
        for record in self.completed_orders(orders):
            completed_at = record.completed_at

            if report_range == ReportRange.MONTHLY:
                key = f"{completed_at.year:04d}-{completed_at.month:02d}"
                label = f"{completed_at:%b} {completed_at:%y}"
            else:
                # weekly is a trailing window of daily buckets, not ISO weeks
                if report_range == ReportRange.WEEKLY and abs(now - completed_at) > window:
                    continue
                key = completed_at.date().isoformat()
                label = f"{completed_at:%b} {completed_at.day}"

            bucket = grouped.get(key)
            if bucket is None:
                bucket = grouped[key] = SalesBucket(key=key, label=label)
            bucket.sales += record.total
            bucket.orders += 1

        return [grouped[key] for key in sorted(grouped)]

    def summarize(self, series: List[SalesBucket]) -> SalesSummary:
        total_sales = sum(bucket.sales for bucket in series)
        total_orders = sum(bucket.orders for bucket in series)
        return SalesSummary(
            total_sales=total_sales,
            total_orders=total_orders,
            average_order_value=total_sales / total_orders if total_orders else 0.0,
        )

    def payment_distribution(self, orders: Iterable[Any]) -> List[DistributionSlice]:
        """Completed orders per payment mode; unset or unknown counts as Cash"""
        return self._distribution(
            self.completed_orders(orders),
            "payment_mode",
            PAYMENT_MODES,
            DEFAULT_PAYMENT_MODE,
        )

    def delivery_distribution(self, orders: Iterable[Any]) -> List[DistributionSlice]:
        """Completed orders per bill delivery method; unset or unknown counts as None"""
        return self._distribution(
            self.completed_orders(orders),
            "delivery_method",
            DELIVERY_METHODS,
            DEFAULT_DELIVERY_METHOD,
        )

    def search_ledger(
        self,
        orders: Iterable[Any],
        query: str = "",
        limit: Optional[int] = None,
    ) -> LedgerPage:
        """
        Case-insensitive search over customer name, phone and order id.

        Rows are newest first and capped at ``limit``; ``total_matches``
        carries the uncapped count.
        """
        limit = limit or self.ledger_limit
        needle = (query or "").strip().lower()

        matches = [
            record
            for record in self.completed_orders(orders)
            if not needle or self._matches(record, needle)
        ]

        return LedgerPage(
            query=query or "",
            rows=[self._to_ledger_row(record) for record in matches[:limit]],
            total_matches=len(matches),
            limit=limit,
        )

    def build_report(
        self,
        orders: Iterable[Any],
        report_range: ReportRange = ReportRange.WEEKLY,
        query: str = "",
        now: Optional[datetime] = None,
    ) -> SalesReport:
        """Assemble every dashboard view from a single pass over the snapshot"""
        now = _as_utc(now or datetime.now(timezone.utc))
        records = self.completed_orders(orders)
        series = self.sales_series(records, report_range, now)

        report = SalesReport(
            range=ReportRange(report_range),
            generated_at=now,
            series=series,
            summary=self.summarize(series),
            payment_modes=self._distribution(
                records, "payment_mode", PAYMENT_MODES, DEFAULT_PAYMENT_MODE
            ),
            delivery_methods=self._distribution(
                records, "delivery_method", DELIVERY_METHODS, DEFAULT_DELIVERY_METHOD
            ),
            ledger=self.search_ledger(records, query),
        )

        logger.info(
            f"Built {report.range.value} sales report: {len(records)} completed orders, "
            f"{len(series)} buckets, {report.ledger.total_matches} ledger matches"
        )
        return report

    def _distribution(
        self,
        records: List[OrderRecord],
        field: str,
        names: List[str],
        default: str,
    ) -> List[DistributionSlice]:
        counts = defaultdict(int)
        for record in records:
            value = getattr(record, field)
            counts[value if value in names else default] += 1

        denominator = len(records) or 1
        return [
            DistributionSlice(
                name=name,
                value=counts[name],
                percentage=counts[name] / denominator * 100,
            )
            for name in names
        ]

    def _matches(self, record: OrderRecord, needle: str) -> bool:
        return any(
            needle in value.lower()
            for value in (record.customer_name, record.customer_phone, record.id)
            if value
        )

    def _to_ledger_row(self, record: OrderRecord) -> LedgerRow:
        return LedgerRow(
            id=record.id,
            completed_at=record.completed_at,
            table_id=record.table_id,
            order_type=record.order_type,
            customer_name=record.customer_name,
            customer_phone=record.customer_phone,
            total=record.total,
            payment_mode=(
                record.payment_mode
                if record.payment_mode in PAYMENT_MODES
                else DEFAULT_PAYMENT_MODE
            ),
            delivery_method=(
                record.delivery_method
                if record.delivery_method in DELIVERY_METHODS
                else DEFAULT_DELIVERY_METHOD
            ),
        )

    def _to_record(self, raw: Any) -> Optional[OrderRecord]:
        if isinstance(raw, OrderRecord):
            return raw.model_copy()
        try:
            if hasattr(raw, "to_document"):
                raw = raw.to_document()
            return OrderRecord.model_validate(raw)
        except (PydanticValidationError, TypeError) as e:
            order_id = raw.get("id") if isinstance(raw, dict) else None
            logger.warning(f"Skipping unreadable order record {order_id}: {e}")
            return None
