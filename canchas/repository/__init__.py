from . import field_repository, reservation_repository

__all__ = ["field_repository", "reservation_repository"]
