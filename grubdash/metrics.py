"""
Prometheus metrics: chain rejections, records created, order status writes and deletions.
"""
from prometheus_client import Counter, generate_latest

requests_rejected_total = Counter(
    "requests_rejected_total",
    "Total requests short-circuited by a guard chain",
    ["status_code"],
)
records_created_total = Counter(
    "records_created_total",
    "Total dishes and orders created",
    ["entity"],
)
order_status_updates_total = Counter(
    "order_status_updates_total",
    "Total order updates, by status written",
    ["status"],
)
orders_deleted_total = Counter(
    "orders_deleted_total",
    "Total pending orders deleted",
)


def get_metrics_content_type():
    return "text/plain; charset=utf-8; version=0.0.4"


def get_metrics_bytes():
    return generate_latest()
