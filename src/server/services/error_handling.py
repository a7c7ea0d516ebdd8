import logging
from functools import wraps
from typing import Callable, Any, Type

from core.exceptions import ApplicationException, ExternalServiceException

# Get logger without configuring (let uvicorn handle logging configuration)
logger = logging.getLogger(__name__)


def handle_upstream_errors(
    service: str,
    exception_class: Type[ExternalServiceException] = None,
) -> Callable:
    """
    Decorator for calls into third-party collaborators.

    Domain exceptions pass through untouched; anything else is logged and
    re-raised as an ExternalServiceException (or ``exception_class``).
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except ApplicationException:
                raise
            except Exception as e:
                logger.error(f"{service} failure in {func.__name__}: {e}", exc_info=True)
                if exception_class is not None:
                    raise exception_class(str(e)) from e
                raise ExternalServiceException(service, str(e)) from e
        return wrapper
    return decorator
