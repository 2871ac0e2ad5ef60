# storefront/utils/decorators.py
"""
Decorators module.
Each decorator has a single responsibility.
"""

import logging
import traceback
from functools import wraps

logger = logging.getLogger(__name__)


class DebugDecorator:
    """
    Debug decorator.
    Logs calls and results with truncation.
    """

    TRUNCATE_LIMIT = 300

    @staticmethod
    def truncate(value, limit=None):
        """Shorten a value for logging while keeping it readable"""
        if limit is None:
            limit = DebugDecorator.TRUNCATE_LIMIT

        if isinstance(value, (str, bytes)):
            val = value.decode(errors="replace") if isinstance(value, bytes) else value
            return val[:limit] + "...[truncated]" if len(val) > limit else val

        if isinstance(value, dict):
            return {k: DebugDecorator.truncate(v, limit) for k, v in list(value.items())[:10]}
        if isinstance(value, (list, tuple)):
            return [DebugDecorator.truncate(v, limit) for v in value[:10]]

        text = repr(value)
        return text[:limit] + "...[truncated]" if len(text) > limit else value

    @staticmethod
    def debug(func):
        """Log entry arguments, return value and failures of func"""

        @wraps(func)
        def wrapper(*args, **kwargs):
            # skip self on bound methods
            shown_args = args[1:] if args and hasattr(args[0], func.__name__) else args
            safe_args = [DebugDecorator.truncate(arg) for arg in shown_args]
            safe_kwargs = {k: DebugDecorator.truncate(v) for k, v in kwargs.items()}

            logger.debug(
                "--> %s called with args=%s, kwargs=%s",
                func.__qualname__,
                safe_args,
                safe_kwargs,
            )

            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.debug(
                    "Exception in %s:\n%s", func.__qualname__, traceback.format_exc()
                )
                raise

            logger.debug(
                "<-- %s returned %r", func.__qualname__, DebugDecorator.truncate(result)
            )
            return result

        return wrapper


def debug(f):
    """Factory function for debug decorator"""
    return DebugDecorator.debug(f)
