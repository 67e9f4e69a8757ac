"""Infrastructure layer: node store client and transport exceptions."""
