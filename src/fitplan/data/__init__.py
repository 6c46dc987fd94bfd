"""Reference data: macro split table and the bundled sample catalog."""
