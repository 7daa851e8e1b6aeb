"""Request builders and the generic fetch layer."""
