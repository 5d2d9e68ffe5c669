from enum import Enum


class ReachabilityStatus(str, Enum):
    """Network reachability of the host."""

    NOT_REACHABLE = "not_reachable"
    UNKNOWN = "unknown"
    REACHABLE_ETHERNET_OR_WIFI = "reachable_ethernet_or_wifi"
    REACHABLE_WWAN = "reachable_wwan"


class ReachabilityNotification(str, Enum):
    """Event names posted when the reachability status changes."""

    NOT_REACHABLE = "reachabilityNotReachable"
    UNKNOWN = "reachabilityUnknown"
    REACHABLE_ETHERNET_OR_WIFI = "reachabilityReachableEthernetOrWifi"
    REACHABLE_WWAN = "reachabilityReachableWWAN"

    @classmethod
    def for_status(cls, status: ReachabilityStatus) -> "ReachabilityNotification":
        match status:
            case ReachabilityStatus.NOT_REACHABLE:
                return cls.NOT_REACHABLE
            case ReachabilityStatus.UNKNOWN:
                return cls.UNKNOWN
            case ReachabilityStatus.REACHABLE_ETHERNET_OR_WIFI:
                return cls.REACHABLE_ETHERNET_OR_WIFI
            case ReachabilityStatus.REACHABLE_WWAN:
                return cls.REACHABLE_WWAN
