"""Application layer: combinators, selection toggle, collection filters."""
