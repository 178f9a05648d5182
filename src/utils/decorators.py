from functools import wraps
import logging

import httpx

from src.utils.exceptions import CollaboratorError


def try_except_decorator(component: str):
    """
    Wraps a gateway call in try-except. Logs the call result and converts
    httpx failures into a CollaboratorError naming *component*.
    Errors are never retried.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                result = func(*args, **kwargs)
                logging.info("%s.%s succeeded", component, func.__name__)
                return result
            except httpx.HTTPStatusError as e:
                logging.error("HTTP status error in %s.%s: %s", component, func.__name__, e.response.text)
                raise CollaboratorError(
                    component,
                    f"returned error response {e.response.status_code}: {_error_detail(e.response)}",
                    status_code=e.response.status_code,
                ) from e
            except httpx.RequestError as e:
                logging.error("HTTP request error in %s.%s: %s", component, func.__name__, str(e))
                raise CollaboratorError(component, f"request failed: {e}") from e
            except CollaboratorError:
                raise
            except Exception as e:
                logging.error("Exception in %s.%s: %s", component, func.__name__, str(e))
                raise

        return wrapper

    return decorator


def try_except_decorator_no_raise(fallback_value=None):
    """
    Decorator similar to try_except_decorator, but on exception:
    - Logs the error
    - Returns 'fallback_value' (default: None)
    - Does NOT re-raise, so execution continues.
    Used for best-effort writes whose failure must not abort the response.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logging.error("Exception in %s: %s", func.__name__, str(e))

            logging.warning(
                "Returning fallback_value=%s instead of raising.", fallback_value
            )
            return fallback_value

        return wrapper

    return decorator


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:500]
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            return error.get("message") or str(error)
        if error:
            return str(error)
        return body.get("message") or body.get("status_message") or str(body)[:500]
    return str(body)[:500]
