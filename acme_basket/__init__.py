"""Acme Widget Co. basket: products, offers, tiered delivery and totals."""
