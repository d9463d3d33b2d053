"""Generate Octokit client modules from the GitHub OpenAPI description."""
