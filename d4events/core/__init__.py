"""Non-UI plumbing: settings file and logging setup."""
