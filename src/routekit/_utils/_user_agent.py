from importlib.metadata import PackageNotFoundError, version

from .constants import PACKAGE_NAME


def package_version() -> str:
    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        return "0.0.0"


def user_agent_value() -> str:
    return f"{PACKAGE_NAME}/{package_version()}"
