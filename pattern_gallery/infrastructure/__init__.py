"""Infrastructure: stdout narration and logging setup."""
