"""Loading GraphQL schemas and reading them into type descriptions."""
