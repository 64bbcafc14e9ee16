"""Domain layer: health check statuses, outcomes and reports."""
