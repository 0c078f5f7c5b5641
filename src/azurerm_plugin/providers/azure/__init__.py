"""Azure Resource Manager provider."""
