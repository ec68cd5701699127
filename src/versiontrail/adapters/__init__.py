"""Adapters connecting the domain to remote record stores."""
