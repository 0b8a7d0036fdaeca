"""HTTP server for texformat."""
