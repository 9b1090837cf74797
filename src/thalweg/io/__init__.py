"""Sounding and point readers, path writers."""
