"""Rewrite due-date labels in task lists to a fixed yyyy/M/d (曜) format."""
