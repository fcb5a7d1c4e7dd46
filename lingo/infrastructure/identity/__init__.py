"""Identity collaborator: resolves the current learner from a bearer token."""
