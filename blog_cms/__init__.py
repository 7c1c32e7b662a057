"""Blog CMS backend: posts, categories and tags behind a single-admin API."""
