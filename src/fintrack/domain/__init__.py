"""Domain layer for fintrack application.

Services are imported from their own modules (``fintrack.domain.user`` and
so on) so that the database layer can import entities from here without a
circular import.
"""
