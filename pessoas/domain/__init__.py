"""Value objects and pure helpers (paging, documents) with no storage access."""
