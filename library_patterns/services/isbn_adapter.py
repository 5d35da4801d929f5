import logging
from typing import Optional, Protocol

from config import settings

logger = logging.getLogger(__name__)


class IsbnCodeProvider(Protocol):
    """Identifier capability expected by the rest of the library."""

    def get_code(self) -> str:
        ...


class ExternalIsbnSystem:
    """Stand-in for an external ISBN registry that cannot be modified.

    It only offers ``get_isbn_code()``; no network calls are made, the code is
    fixed at construction time (``EXTERNAL_ISBN_CODE`` by default).
    """

    def __init__(self, code: Optional[str] = None) -> None:
        self._code = code if code is not None else settings.external_isbn_code

    def get_isbn_code(self) -> str:
        return self._code


class IsbnAdapter:
    """Exposes an ExternalIsbnSystem through the ``get_code()`` capability."""

    def __init__(self, external: ExternalIsbnSystem) -> None:
        self._external = external

    @property
    def external(self) -> ExternalIsbnSystem:
        return self._external

    def get_code(self) -> str:
        code = self._external.get_isbn_code()
        logger.debug(f"ISBN code resolved through adapter: {code}")
        return code
