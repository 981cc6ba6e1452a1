"""HTTP layer of the VIP exporter."""
