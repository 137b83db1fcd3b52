"""Error response builder for RFC 7807 Problem Details.

Routers map handler errors (login outcomes, verification and reset error
codes) to a status and title; this module renders the response body.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> return ErrorResponseBuilder.build(
        ...     request=request,
        ...     status_code=401,
        ...     error="invalid_code",
        ...     title="Invalid Code",
        ...     detail="Invalid code!",
        ... )
    """

    @staticmethod
    def build(
        request: Request,
        status_code: int,
        error: str,
        title: str,
        detail: str,
    ) -> JSONResponse:
        """Render a problem response.

        Args:
            request: FastAPI Request object (for instance URL and trace ID).
            status_code: HTTP status code.
            error: Machine-readable error code (becomes the type URI slug).
            title: Short summary of the problem type.
            detail: Human-readable message for this occurrence.

        Returns:
            JSONResponse with ProblemDetails content and X-Trace-Id header.
        """
        trace_id = getattr(request.state, "trace_id", None)
        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error}",
            title=title,
            status=status_code,
            detail=detail,
            instance=str(request.url.path),
            trace_id=trace_id,
        )
        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            headers={"X-Trace-Id": trace_id} if trace_id else None,
        )
