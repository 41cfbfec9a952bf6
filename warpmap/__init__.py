"""Warp-graph location hierarchy mapping."""
