"""Site content API: section CRUD over a single JSON document."""
