"""Cross-cutting settings and logging helpers shared by every package under `src`."""
