from .logging import csv_logger, format_metrics, get_logger, log_metrics

__all__ = ["get_logger", "format_metrics", "log_metrics", "csv_logger"]
