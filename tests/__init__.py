"""Unit tests for quicktrans."""
