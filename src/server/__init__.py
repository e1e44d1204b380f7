"""HTTP API for bootstencil."""
