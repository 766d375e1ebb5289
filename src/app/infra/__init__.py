"""Implementações concretas de IO."""
