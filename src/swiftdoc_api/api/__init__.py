"""JSON API: endpoint handlers and HTTP route registration."""
