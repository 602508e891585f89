from .errors import NeopleApiError

__all__ = ["NeopleApiError"]
