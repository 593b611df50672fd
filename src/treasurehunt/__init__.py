"""
treasurehunt — command-line store for treasure hunt records.

Each hunt is a directory holding a flat binary record file and an
append-only audit log. A convenience symlink in the working directory
points at every hunt's log.

Package layout (src/treasurehunt/):
  core/       — records codec, record store, hunt lifecycle, audit log, config
  cli/        — Click CLI entry point and per-operation handlers
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
