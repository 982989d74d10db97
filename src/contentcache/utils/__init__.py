"""Helper functions for contentcache."""
