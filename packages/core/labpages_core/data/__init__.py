"""Versioned content data shipped with labpages-core."""
