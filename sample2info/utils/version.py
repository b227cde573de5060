from importlib.metadata import version, PackageNotFoundError
from functools import cache

DISTRIBUTION_NAME = 'vcfsample2info'


@cache
def get_version() -> str:
    if __package__ is None:
        return "development"
    try:
        return str(version(DISTRIBUTION_NAME))
    except PackageNotFoundError:
        return "development"
