"""Plugins shipped with kubeviz."""
