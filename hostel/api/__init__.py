"""HTTP API - app factory, routes and payload schemas."""
