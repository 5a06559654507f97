"""YAML configuration of interpolated functions."""
