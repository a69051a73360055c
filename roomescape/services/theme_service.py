"""Theme service: theme catalogue and popularity ranking."""

from collections.abc import Callable
from datetime import date, timedelta

import structlog

from roomescape.domain import Theme, ThemeId
from roomescape.domain.errors import ConflictError, ConflictKind, NotFoundError, ResourceKind
from roomescape.stores.interfaces import ReservationRepository, ThemeRepository

logger = structlog.get_logger(__name__)

POPULAR_THEME_DAYS = 7
POPULAR_THEME_LIMIT = 10


class ThemeService:
    """Service for theme operations."""

    def __init__(
        self,
        themes: ThemeRepository,
        reservations: ReservationRepository,
        clock: Callable[[], date] = date.today,
        popular_days: int = POPULAR_THEME_DAYS,
        popular_limit: int = POPULAR_THEME_LIMIT,
    ) -> None:
        self._themes = themes
        self._reservations = reservations
        self._clock = clock
        self._popular_days = popular_days
        self._popular_limit = popular_limit

    def list_themes(self) -> list[Theme]:
        return self._themes.find_all()

    def create_theme(self, name: str, description: str, thumbnail: str) -> Theme:
        """Register a new theme.

        Raises:
            ValidationError: If the name, description or thumbnail is invalid.
        """
        saved = self._themes.save(Theme.create(name, description, thumbnail))
        logger.info("theme_created", theme_id=saved.id.value, name=saved.name.value)
        return saved

    def delete_theme(self, theme_id: int | str) -> None:
        """Remove a theme nobody has booked.

        Raises:
            ValidationError: If the id is malformed.
            NotFoundError: If the theme does not exist.
            ConflictError: If any reservation references the theme.
        """
        parsed_id = ThemeId.parse(theme_id)
        if not self._themes.exists_by_id(parsed_id):
            raise NotFoundError(ResourceKind.THEME, parsed_id.value)
        if self._reservations.exists_by_theme_id(parsed_id):
            logger.info("theme_delete_rejected", theme_id=parsed_id.value)
            raise ConflictError(ConflictKind.THEME_IN_USE)
        self._themes.delete_by_id(parsed_id)
        logger.info("theme_deleted", theme_id=parsed_id.value)

    def list_popular_themes(self) -> list[Theme]:
        """Return the most booked themes of the trailing window ending yesterday.

        With the defaults this covers ``[today - 7, today - 1]`` and returns at
        most 10 themes, most reservations first, ties by ascending id.
        """
        today = self._clock()
        start_date = today - timedelta(days=self._popular_days)
        end_date = today - timedelta(days=1)
        return self._themes.find_popular_themes(start_date, end_date, self._popular_limit)
