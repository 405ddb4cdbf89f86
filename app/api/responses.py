from fastapi import Response, status

from app.core.handlers import error_response
from app.core.result import Failure, Result


def render(result: Result, status_code: int = status.HTTP_200_OK):
    """
    Turn a handler result into what the endpoint returns.

    Failures become an error envelope with the status of their error tag.
    A successful value of None becomes an empty response (204 No Content).
    """
    if isinstance(result, Failure):
        return error_response(result.error)
    if result.value is None:
        return Response(status_code=status_code)
    return result.value
