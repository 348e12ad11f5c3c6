"""Page adapters - widgets and their shared per-page collaborators."""
