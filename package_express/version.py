"""Package Express calculator version, stamped on every calculated row."""

VERSION = "2025.01.0"
