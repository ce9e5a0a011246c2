import logging
from typing import TypeVar

from .exceptions import NullPointerException

T = TypeVar("T")

logger = logging.getLogger(__name__)


def require_non_null(value: T | None, message: str | None = None) -> T:
    """
    valueがNoneでないことを検証し、そのまま返す。

    Args:
        value: 検証する値
        message: 例外に付与するメッセージ

    Raises:
        NullPointerException: valueがNoneの場合
    """
    if value is None:
        logger.debug("require_non_null received None: %s", message)
        raise NullPointerException(message)
    return value
