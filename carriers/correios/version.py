"""Correios calculator version, stamped on every calculated row."""

VERSION = "1.0.0"
