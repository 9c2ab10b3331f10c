"""Wish records, typed errors and the in-process wish stores."""
