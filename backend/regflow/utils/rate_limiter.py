# /regflow/utils/rate_limiter.py

from slowapi import Limiter
from regflow.utils.request_utils import get_remote_address
from regflow.config.settings import settings

# Shared limiter instance, imported by both the app and the route modules.

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[f"{settings.rate_limit_per_minute}/minute"]
)
