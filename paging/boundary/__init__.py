"""Boundary adapters over the relational and document stores."""
