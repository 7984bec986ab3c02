"""Command line interface for srcset_parser."""
