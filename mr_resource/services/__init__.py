"""Resource services: version resolution, materialization, status reporting."""
