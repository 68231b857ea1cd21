from trailmix.monitoring.metrics import get_metrics, record_nearby_query, record_request, reset_metrics

__all__ = ["get_metrics", "record_nearby_query", "record_request", "reset_metrics"]
