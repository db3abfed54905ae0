"""Domain layer for shoptab application.

Services are imported from their modules directly (e.g.
``shoptab.domain.ledger``) so that the storage layer can depend on
``shoptab.domain.entities`` without a circular import.
"""
