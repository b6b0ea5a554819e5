"""primkit: convenience operations over strings, lists, maps, booleans and dates."""

from primkit.core.config import settings
from primkit.extensions import XBool, XDate, XDict, XList, XStr, ext
from primkit.logger.logger import logger

logger.setLevel(settings.LOG_LEVEL)

__version__ = "0.1.0"

__all__ = ["XBool", "XDate", "XDict", "XList", "XStr", "ext", "settings"]
