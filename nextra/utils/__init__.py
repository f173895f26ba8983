from .datetime_utils import utc_now, epoch_millis
from .validation_utils import is_blank

__all__ = ["utc_now", "epoch_millis", "is_blank"]
