"""Small cross-cutting helpers (logging setup)."""
