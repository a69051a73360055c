"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.serializers import Serializer
from rest_framework.views import APIView

from roomescape import container
from roomescape.domain.errors import (
    ConflictError,
    DomainError,
    ErrorCode,
    NotFoundError,
    StorageError,
    ValidationError,
)
from roomescape.handlers.serializers import (
    ReservationRequestSerializer,
    ReservationSerializer,
    ReservationTimeRequestSerializer,
    ReservationTimeSerializer,
    ThemeRequestSerializer,
    ThemeSerializer,
)

_ERROR_STATUS = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    StorageError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_response(error: DomainError) -> Response:
    """Translate a domain error into a JSON error body."""
    return Response(
        {"code": error.code.value, "message": error.message},
        status=_ERROR_STATUS.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def _invalid_body(serializer: Serializer) -> Response:
    fields = ", ".join(sorted(serializer.errors))
    return Response(
        {"code": ErrorCode.VALIDATION_FAILED.value, "message": f"Invalid request body: {fields}"},
        status=status.HTTP_400_BAD_REQUEST,
    )


class ReservationListView(APIView):
    """Handler for GET/POST /api/reservations"""

    def get(self, request: Request) -> Response:
        service = container.get_reservation_service()
        date = request.query_params.get("date")
        theme_id = request.query_params.get("themeId")
        try:
            if date is not None and theme_id is not None:
                reservations = service.list_reservations_filtered(date, theme_id)
            else:
                reservations = service.list_reservations()
        except DomainError as error:
            return error_response(error)
        return Response(ReservationSerializer(reservations, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = ReservationRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return _invalid_body(serializer)
        body = serializer.validated_data
        try:
            reservation = container.get_reservation_service().create_reservation(
                body["date"], body["name"], body["timeId"], body["themeId"]
            )
        except DomainError as error:
            return error_response(error)
        return Response(
            ReservationSerializer(reservation).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": f"/api/reservations/{reservation.id}"},
        )


class ReservationDetailView(APIView):
    """Handler for DELETE /api/reservations/{reservation_id}"""

    def delete(self, request: Request, reservation_id: str) -> Response:
        try:
            container.get_reservation_service().delete_reservation(reservation_id)
        except DomainError as error:
            return error_response(error)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ThemeListView(APIView):
    """Handler for GET/POST /api/themes"""

    def get(self, request: Request) -> Response:
        try:
            themes = container.get_theme_service().list_themes()
        except DomainError as error:
            return error_response(error)
        return Response(ThemeSerializer(themes, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = ThemeRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return _invalid_body(serializer)
        body = serializer.validated_data
        try:
            theme = container.get_theme_service().create_theme(
                body["name"], body["description"], body["thumbnail"]
            )
        except DomainError as error:
            return error_response(error)
        return Response(
            ThemeSerializer(theme).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": f"/api/themes/{theme.id}"},
        )


class ThemeDetailView(APIView):
    """Handler for DELETE /api/themes/{theme_id}"""

    def delete(self, request: Request, theme_id: str) -> Response:
        try:
            container.get_theme_service().delete_theme(theme_id)
        except DomainError as error:
            return error_response(error)
        return Response(status=status.HTTP_204_NO_CONTENT)


class PopularThemeListView(APIView):
    """Handler for GET /api/themes/popular"""

    def get(self, request: Request) -> Response:
        try:
            themes = container.get_theme_service().list_popular_themes()
        except DomainError as error:
            return error_response(error)
        return Response(ThemeSerializer(themes, many=True).data)


class ReservationTimeListView(APIView):
    """Handler for GET/POST /api/times"""

    def get(self, request: Request) -> Response:
        try:
            times = container.get_reservation_time_service().list_times()
        except DomainError as error:
            return error_response(error)
        return Response(ReservationTimeSerializer(times, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = ReservationTimeRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return _invalid_body(serializer)
        try:
            reservation_time = container.get_reservation_time_service().create_time(
                serializer.validated_data["startAt"]
            )
        except DomainError as error:
            return error_response(error)
        return Response(
            ReservationTimeSerializer(reservation_time).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": f"/api/times/{reservation_time.id}"},
        )


class ReservationTimeDetailView(APIView):
    """Handler for DELETE /api/times/{time_id}"""

    def delete(self, request: Request, time_id: str) -> Response:
        try:
            container.get_reservation_time_service().delete_time(time_id)
        except DomainError as error:
            return error_response(error)
        return Response(status=status.HTTP_204_NO_CONTENT)
