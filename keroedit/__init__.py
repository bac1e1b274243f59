"""Kero Blaster map (PXPACK) editor core."""
