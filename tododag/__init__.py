"""Ordering constraints between to-do items, kept acyclic."""
