# pagebuilder/storage/policy.py
import logging
from typing import Callable, Optional, Tuple, TypeVar

from pagebuilder.domain.exceptions import PersistenceError
from .backends import StorageBackend

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FallbackPolicy:
    """
    Decides which backend serves a storage call.

    strict:  durable backend only. A missing or failing durable backend
             raises PersistenceError; the fallback is never consulted.
    lenient: a missing or failing durable backend switches every later
             call to the fallback for the life of the policy.
    """

    def __init__(
        self,
        durable: Optional[StorageBackend],
        fallback: Optional[StorageBackend] = None,
        *,
        strict: bool,
    ):
        if not strict and fallback is None:
            raise ValueError("Lenient mode requires a fallback backend")

        self.durable = durable
        self.fallback = fallback
        self.strict = strict
        self._durable_healthy = durable is not None

        if durable is None:
            if strict:
                logger.error("No durable page backend configured; storage calls will fail")
            else:
                logger.warning(
                    "No durable page backend configured, using %s backend", fallback.name
                )

    @property
    def mode(self) -> str:
        return "strict" if self.strict else "lenient"

    @property
    def active_backend(self) -> Optional[StorageBackend]:
        if self.durable is not None and self._durable_healthy:
            return self.durable
        return None if self.strict else self.fallback

    def run(
        self,
        operation: str,
        call: Callable[[StorageBackend], T],
        *,
        slug: Optional[str] = None,
    ) -> Tuple[T, StorageBackend]:
        """
        Run `call` against the backend the policy selects.

        Returns the result together with the backend that produced it.
        """
        if self.durable is None or not self._durable_healthy:
            if self.strict:
                raise PersistenceError(
                    f"{operation} failed: durable backend is not configured",
                    operation=operation,
                    slug=slug,
                )
            return self._run_fallback(operation, call, slug), self.fallback

        try:
            return call(self.durable), self.durable
        except Exception as exc:
            if self.strict:
                logger.error(
                    "Durable backend %s failed during %s (slug=%s): %s",
                    self.durable.name, operation, slug, exc,
                )
                raise PersistenceError(
                    f"{operation} failed on {self.durable.name} backend: {exc}",
                    operation=operation,
                    slug=slug,
                    cause=exc,
                ) from exc

            logger.warning(
                "Durable backend %s failed during %s (slug=%s), switching to %s: %s",
                self.durable.name, operation, slug, self.fallback.name, exc,
            )
            self._durable_healthy = False

        return self._run_fallback(operation, call, slug), self.fallback

    def _run_fallback(self, operation, call, slug):
        try:
            return call(self.fallback)
        except Exception as exc:
            logger.error(
                "Fallback backend %s failed during %s (slug=%s): %s",
                self.fallback.name, operation, slug, exc,
            )
            raise PersistenceError(
                f"{operation} failed on {self.fallback.name} backend: {exc}",
                operation=operation,
                slug=slug,
                cause=exc,
            ) from exc
