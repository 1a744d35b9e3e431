"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from theater.domain import DomainError
from theater.handlers.serializers import StatementRequestSerializer, StatementSerializer
from theater.services import StatementService

logger = logging.getLogger("theater.handlers")


def error_response(error: DomainError) -> Response:
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
    )


class StatementView(APIView):
    """Handler for POST /api/statements"""

    def post(self, request: Request) -> Response:
        serializer = StatementRequestSerializer(data=request.data)
        if not serializer.is_valid():
            logger.info("Rejected statement request: %s", serializer.errors)
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        service = StatementService(serializer.to_catalog())
        try:
            data = service.build_statement(serializer.to_invoice())
        except DomainError as exc:
            return error_response(exc)

        return Response(StatementSerializer(data).data)
