"""Cross-cutting helpers: structured logging and date parsing."""
