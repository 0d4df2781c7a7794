"""HTTP surface of the NEWS score service."""
