"""
Monitoring and observability configuration.

Provides Prometheus metrics and structured logging for request signing.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
import time
from functools import wraps
from typing import Callable, Optional
import logging
import os
from pythonjsonlogger import jsonlogger


# Prometheus Metrics
SIGNATURES_TOTAL = Counter(
    'oauth_signatures_total',
    'Total number of OAuth signatures generated',
    ['signature_method']
)

SIGNING_DURATION_SECONDS = Histogram(
    'oauth_signing_duration_seconds',
    'OAuth request signing duration in seconds',
    ['signature_method'],
    buckets=(0.0001, 0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1)
)

SIGNING_ERRORS_TOTAL = Counter(
    'oauth_signing_errors_total',
    'Total number of OAuth signing errors',
    ['error_type']
)


def setup_json_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure JSON structured logging on the root logger.

    Args:
        level: Log level name. Defaults to the LOG_LEVEL environment
               variable, or INFO.

    Returns:
        The root logger
    """
    log_handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        '%(asctime)s %(name)s %(levelname)s %(message)s',
        timestamp=True
    )
    log_handler.setFormatter(formatter)

    log_level_name = (level or os.environ.get('LOG_LEVEL', 'INFO')).upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    logging.root.handlers = []
    logging.root.addHandler(log_handler)
    logging.root.setLevel(log_level)

    return logging.root


def track_signing(func: Callable) -> Callable:
    """
    Decorator to track signing metrics and timing on an Authorizer method.

    The signature method label is read from the Authorizer's configuration.

    Args:
        func: Authorizer method to decorate

    Returns:
        Wrapped method with metrics tracking
    """
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        start_time = time.perf_counter()
        signature_method = self.config.signature_method

        try:
            result = func(self, *args, **kwargs)
        except Exception as e:
            SIGNING_ERRORS_TOTAL.labels(
                error_type=type(e).__name__
            ).inc()
            raise

        duration = time.perf_counter() - start_time

        SIGNATURES_TOTAL.labels(
            signature_method=signature_method
        ).inc()

        SIGNING_DURATION_SECONDS.labels(
            signature_method=signature_method
        ).observe(duration)

        return result

    return wrapper


def get_metrics():
    """
    Generate Prometheus metrics in exposition format.

    Returns:
        Tuple of (metrics_data, content_type)
    """
    return generate_latest(), CONTENT_TYPE_LATEST
