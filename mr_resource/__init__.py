"""GitLab merge request resource: check, in and out commands."""
