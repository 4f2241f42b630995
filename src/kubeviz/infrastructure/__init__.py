"""Infrastructure layer — YAML parsing, file and stdin input, clipboard, templates."""
