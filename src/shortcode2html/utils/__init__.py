"""Utility helpers for shortcode2html."""
