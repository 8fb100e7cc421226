"""HTTP service exposing bcmath operations."""
