from logging import getLogger
from typing import Callable

from ..models.reachability import ReachabilityStatus

ReachabilityObserver = Callable[[ReachabilityStatus], None]


class Reachability:
    """Tracks the host's reachability and reports changes to one observer.

    Detecting the status is left to platform code, which feeds each new
    reading in through :meth:`update`. Repeated readings of the same status
    are not reported again.
    """

    def __init__(
        self,
        status: ReachabilityStatus = ReachabilityStatus.UNKNOWN,
        observer: ReachabilityObserver | None = None,
    ) -> None:
        self._logger = getLogger("routekit")
        self._status = status
        self.observer = observer

    @property
    def status(self) -> ReachabilityStatus:
        return self._status

    @property
    def is_reachable(self) -> bool:
        return self._status in (
            ReachabilityStatus.REACHABLE_ETHERNET_OR_WIFI,
            ReachabilityStatus.REACHABLE_WWAN,
        )

    def update(self, status: ReachabilityStatus) -> bool:
        """Record a new reading.

        Returns:
            bool: ``True`` if the status changed and the observer was called.
        """
        if status == self._status:
            return False

        self._logger.debug(
            f"Reachability changed: {self._status.value} -> {status.value}"
        )
        self._status = status
        if self.observer is not None:
            self.observer(status)
        return True
